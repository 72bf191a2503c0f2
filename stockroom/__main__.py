from stockroom.main import main

raise SystemExit(main())
