from typeshape.cli import main

raise SystemExit(main())
