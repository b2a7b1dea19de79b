"""Allow running the command with python -m fxquote."""

from fxquote.app import main

raise SystemExit(main())
