"""Allow ``python -m netsuite_rest``."""

from netsuite_rest.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
