"""CLI command: tailwindify convert -- rewrite a CSS file with @apply rules."""

from __future__ import annotations

import dataclasses
import json
import logging
import sys
from pathlib import Path

import click

from tailwindify.config import ConverterConfig, load_config
from tailwindify.converter import TailwindConverter
from tailwindify.errors import ConfigError, CSSParseError


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="JSON converter configuration file.",
)
@click.option(
    "--rem-in-px",
    type=float,
    default=None,
    help="Pixels per rem; rem values are matched against theme values in px.",
)
@click.option(
    "--arbitrary-properties",
    is_flag=True,
    default=False,
    help="Convert declarations with no utility into [prop:value] classes.",
)
@click.option("--no-reduce", is_flag=True, default=False, help="Keep longhand classes.")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print {selector, classes} objects instead of CSS.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log conversion details.")
def convert(
    cssfile: str,
    config_path: str | None,
    rem_in_px: float | None,
    arbitrary_properties: bool,
    no_reduce: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """Convert the rules of a CSS file into Tailwind utility classes.

    Prints the rewritten CSS, where converted declarations are replaced by
    ``@apply`` rules.  Command-line options override the config file.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(config_path) if config_path else ConverterConfig()
        overrides: dict[str, object] = {}
        if rem_in_px is not None:
            overrides["rem_in_px"] = rem_in_px
        if arbitrary_properties:
            overrides["arbitrary_properties"] = True
        if no_reduce:
            overrides["reduce"] = False
        converter = TailwindConverter(dataclasses.replace(config, **overrides))
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    try:
        source = Path(cssfile).read_text(encoding="utf-8")
        result = converter.convert_css(source)
    except CSSParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    if as_json:
        payload = [
            {"selector": node.selector, "classes": node.classes}
            for node in result.nodes
            if node.classes
        ]
        click.echo(json.dumps(payload, indent=2))
    else:
        click.echo(result.css, nl=False)
