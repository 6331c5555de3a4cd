"""Allow running bump-py as ``python -m bump_py``."""

from __future__ import annotations

from bump_py.cli.app import main

if __name__ == "__main__":
    main()
