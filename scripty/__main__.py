from scripty.cli import main

raise SystemExit(main())
