"""Allow ``python -m tasklocation``."""

from tasklocation.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
