from labsh.cli import main

raise SystemExit(main())
