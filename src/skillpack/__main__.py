"""Allow ``python -m skillpack``."""

from __future__ import annotations

from skillpack.cli.main import main

raise SystemExit(main())
