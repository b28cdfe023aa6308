from doublestrike.app import main

raise SystemExit(main())
