"""Entry point for `python -m kingly_layouts`."""

import sys

from .cli import main as cli_main


def main() -> None:
    """Entry point for python -m kingly_layouts and the console script."""
    try:
        sys.exit(cli_main())
    except KeyboardInterrupt:
        print("Operation cancelled by user")
        sys.exit(130)


if __name__ == "__main__":
    main()
