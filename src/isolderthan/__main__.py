"""Allow ``python -m isolderthan``."""

from isolderthan.cli import cli

if __name__ == "__main__":
    cli()
