"""Entry point for ``python -m walkpwd``."""

from walkpwd.cli.app import app

if __name__ == "__main__":
    app()
