from mdpad.main import main

raise SystemExit(main())
