from .abi2ts import main

raise SystemExit(main())
