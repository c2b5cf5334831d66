from densematrix.cli import main

raise SystemExit(main())
