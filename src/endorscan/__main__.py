from endorscan.cli import main

raise SystemExit(main())
