"""tgcmd CLI entry."""

from tgcmd.cli import app

if __name__ == "__main__":
    app()
