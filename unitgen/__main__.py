"""Entry point for ``python -m unitgen``."""

from unitgen.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
