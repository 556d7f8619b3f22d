"""Module entrypoint for ``python -m versiontree``."""

from .cli import main


if __name__ == "__main__":
    main()
