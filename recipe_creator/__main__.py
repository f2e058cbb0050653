from recipe_creator.main import main

raise SystemExit(main())
