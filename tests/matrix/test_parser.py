"""
Tests for textual matrix input.

Validates:
    - Rows per line, blank line or end of stream terminates
    - Trailing non-numeric tokens are ignored
    - Ragged rows rejected with the offending line number
    - The stream is left positioned after the terminating blank line
"""

import io

import numpy as np
import pytest

from densematrix.core.exceptions import ShapeMismatchError
from densematrix.matrix import Matrix, parse_matrix, parse_text
from densematrix.matrix.parser import parse_row


class TestParseRow:

    def test_numbers(self):
        assert parse_row("1 -2.5  3e2\n") == [1.0, -2.5, 300.0]

    def test_stops_at_first_non_number(self):
        assert parse_row("1 2 x 3") == [1.0, 2.0]

    def test_underscore_grouping_is_not_a_number(self):
        assert parse_row("1 1_000 2") == [1.0]

    def test_special_values(self):
        row = parse_row("nan inf -infinity")
        assert np.isnan(row[0])
        assert row[1:] == [np.inf, -np.inf]

    def test_no_numbers(self):
        assert parse_row("abc 1") == []


class TestParseMatrix:

    def test_blank_line_terminates(self):
        assert parse_text("1 2\n3 4\n\n") == Matrix([[1, 2], [3, 4]])

    def test_end_of_stream_terminates(self):
        assert parse_text("1 2\n3 4") == Matrix([[1, 2], [3, 4]])

    def test_whitespace_only_line_is_blank(self):
        assert parse_text("1\n \t \n2\n") == Matrix([[1]])

    def test_tabs_and_runs_of_spaces(self):
        assert parse_text("1\t2   3\n") == Matrix([[1, 2, 3]])

    def test_empty_input(self):
        assert parse_text("") == Matrix()
        assert parse_text("\n1 2\n") == Matrix()

    def test_trailing_text_ignored(self):
        assert parse_text("1 2 # first\n3 4 end\n") == Matrix([[1, 2], [3, 4]])

    def test_ragged(self):
        with pytest.raises(ShapeMismatchError, match="line 2.*expected 2 numbers, got 3"):
            parse_text("1 2\n3 4 5\n")

    def test_rest_of_stream_left_unread(self):
        stream = io.StringIO("1 2\n3 4\n\n5 6\n")
        first = parse_matrix(stream)
        assert first == Matrix([[1, 2], [3, 4]])
        assert stream.read() == "5 6\n"

    def test_two_matrices_in_one_stream(self):
        stream = io.StringIO("1\n2\n\n3 4\n")
        assert parse_matrix(stream) == Matrix([1, 2])
        assert parse_matrix(stream) == Matrix([[3, 4]])

    def test_from_stream_and_text(self):
        assert Matrix.from_stream(io.StringIO("7\n")) == Matrix.from_text("7")

    def test_round_trip_through_str(self, rng):
        m = Matrix(rng.integers(-50, 50, (3, 4)))
        assert parse_text(str(m)) == m
