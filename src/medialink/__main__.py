"""Allow ``python -m medialink``."""

from medialink.cli.main import main

if __name__ == "__main__":
    main()
