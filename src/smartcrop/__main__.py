"""Entry point for ``python -m smartcrop``."""

from smartcrop.cli.main import app

if __name__ == "__main__":
    app(prog_name="smartcrop")
