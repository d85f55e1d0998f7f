"""Allow ``python -m cpdf`` to behave like the ``cpdf`` console script."""

from cpdf.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
