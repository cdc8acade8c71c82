from asset_optimizer.cli import main

raise SystemExit(main())
