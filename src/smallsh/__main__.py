from smallsh import cli

raise SystemExit(cli.main())
