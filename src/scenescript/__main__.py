from scenescript.main import main

raise SystemExit(main())
