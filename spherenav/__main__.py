from spherenav.cli import main

raise SystemExit(main())
