"""Main module."""

from hubspace.cli.main import cli

if __name__ == "__main__":
    cli()
