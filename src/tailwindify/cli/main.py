"""tailwindify CLI entry point: Click group with subcommands."""

import click

from tailwindify import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tailwindify")
def cli() -> None:
    """tailwindify - convert CSS rules into Tailwind CSS utility classes."""


# Import and register subcommands
from tailwindify.cli.convert import convert  # noqa: E402
from tailwindify.cli.reduce import reduce  # noqa: E402

cli.add_command(convert)
cli.add_command(reduce)
