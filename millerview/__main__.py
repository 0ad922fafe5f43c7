"""Module entrypoint for ``python -m millerview``."""

from .cli import main


if __name__ == "__main__":
    main()
