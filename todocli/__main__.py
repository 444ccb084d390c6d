from todocli.cli import main

raise SystemExit(main())
