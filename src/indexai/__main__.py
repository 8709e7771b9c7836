from indexai.cli import main

raise SystemExit(main())
