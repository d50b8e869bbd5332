"""Allow ``python -m fx_overview``."""

from __future__ import annotations

import sys

from fx_overview.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
