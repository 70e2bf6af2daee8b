"""CLI command: jsx-stylesheet resolve -- preview a class value at runtime."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from jsx_stylesheet.runtime import get_style, merge_styles


@click.command()
@click.argument("value")
@click.option(
    "-s",
    "--stylesheet",
    "stylesheets",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON class-to-style mapping produced by the stylesheet loader (repeatable).",
)
def resolve(value: str, stylesheets: tuple[str, ...]) -> None:
    """Resolve VALUE against stylesheets as the injected _getStyle helper would.

    VALUE is a class string ("header active"), or a JSON array or object
    ('["header", {"active": true}]'). Several stylesheets are merged in the
    order given, later ones winning.
    """
    sheets = []
    for name in stylesheets:
        try:
            sheet = json.loads(Path(name).read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            click.echo(f"Invalid stylesheet JSON in {name}: {exc}", err=True)
            sys.exit(1)
        if not isinstance(sheet, dict):
            click.echo(f"Stylesheet {name} must be a JSON object", err=True)
            sys.exit(1)
        sheets.append(sheet)

    parsed: object = value
    if value.lstrip().startswith(("[", "{")):
        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as exc:
            raise click.BadParameter(f"not valid JSON: {exc}", param_hint="VALUE") from exc

    style = get_style(parsed, merge_styles(*sheets))
    click.echo(json.dumps(style, indent=2, sort_keys=True))
