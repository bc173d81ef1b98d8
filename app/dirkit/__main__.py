"""Allow running dirkit as ``python -m dirkit``."""

from dirkit.cli.main import app

if __name__ == "__main__":
    app()
