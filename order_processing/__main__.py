from order_processing.main import main

raise SystemExit(main())
