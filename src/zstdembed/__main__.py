from zstdembed.cli import main

raise SystemExit(main())
