"""Allow running the package with ``python -m solid_showcase``."""

from solid_showcase.cli.main import main

if __name__ == "__main__":
    main()
