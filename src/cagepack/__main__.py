from cagepack.cli import main

raise SystemExit(main())
