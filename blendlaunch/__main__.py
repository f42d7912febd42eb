from blendlaunch.cli import main

raise SystemExit(main())
