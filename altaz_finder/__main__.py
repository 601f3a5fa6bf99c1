from altaz_finder.cli import main

raise SystemExit(main())
