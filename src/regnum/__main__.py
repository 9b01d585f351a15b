from regnum.cli import main

raise SystemExit(main())
