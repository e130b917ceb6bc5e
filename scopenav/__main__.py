"""Module entrypoint for ``python -m scopenav``."""

from .cli import main


if __name__ == "__main__":
    main()
