from volspec.cli import main

raise SystemExit(main())
