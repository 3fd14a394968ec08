"""Allow running the setup tool with `python -m openclaw_setup`."""

from .cli.main import cli


if __name__ == '__main__':
    cli()
