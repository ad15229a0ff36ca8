"""Allow ``python -m lazyspf``."""

from lazyspf.cli import main

if __name__ == "__main__":
    main()
