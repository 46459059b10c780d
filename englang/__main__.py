"""Allow ``python -m englang``."""

from englang.cli import main

if __name__ == "__main__":
    main()
