"""CLI command: tailwindify reduce -- collapse longhand utility classes."""

from __future__ import annotations

import click

from tailwindify.reduction import reduce_classes


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.option(
    "--separator",
    default=None,
    help="Variant separator; classes are then reduced per variant group.",
)
@click.option("--prefix", default="", help="Class-name prefix, e.g. tw-.")
def reduce(classes: tuple[str, ...], separator: str | None, prefix: str) -> None:
    """Reduce longhand utility CLASSES (pt-4 pr-4 ...) to shorthands.

    Each argument may hold several space separated classes.
    """
    flat = [name for argument in classes for name in argument.split()]
    click.echo(" ".join(reduce_classes(flat, separator, prefix)))
