"""Allow running as ``python -m revivehair``."""

from revivehair.cli import main

if __name__ == "__main__":
    main()
