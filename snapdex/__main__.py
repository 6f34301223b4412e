from snapdex.cli import main

raise SystemExit(main())
