"""CLI command: jsx-stylesheet transform -- rewrite modules."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jsx_stylesheet import transform_source
from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.parser import ParseError


def build_config(
    retain_class_name: bool, extensions: tuple[str, ...], environment_mode: str | None
) -> TransformConfig:
    options: dict[str, object] = {"retain_class_name": retain_class_name}
    if extensions:
        options["stylesheet_extensions"] = extensions
    if environment_mode is not None:
        options["environment_mode"] = environment_mode
    try:
        return TransformConfig.from_options(options)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--extension") from exc


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--retain-class-name", is_flag=True, help="Keep className next to the new style.")
@click.option(
    "--extension",
    "extensions",
    multiple=True,
    help="Stylesheet file extension (repeatable); replaces the default set.",
)
@click.option("--env", "environment_mode", default=None, help="Environment mode (default: $NODE_ENV).")
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write to this file.")
@click.option("--in-place", is_flag=True, help="Overwrite each input file.")
@click.option("--check", is_flag=True, help="Exit with code 1 if any file would change.")
def transform(
    files: tuple[str, ...],
    retain_class_name: bool,
    extensions: tuple[str, ...],
    environment_mode: str | None,
    output: str | None,
    in_place: bool,
    check: bool,
) -> None:
    """Resolve className attributes of JSX modules into style attributes.

    Prints the transformed module to stdout unless --output, --in-place or
    --check is given.
    """
    if output and in_place:
        raise click.UsageError("--output and --in-place are mutually exclusive")
    if output and len(files) > 1:
        raise click.UsageError("--output needs exactly one input file")

    config = build_config(retain_class_name, extensions, environment_mode)
    changed: list[str] = []

    for name in files:
        path = Path(name)
        source = path.read_text(encoding="utf-8")
        try:
            result = transform_source(source, config)
        except ParseError as exc:
            click.echo(f"Parse error in {path}: {exc}", err=True)
            sys.exit(1)

        if result != source:
            changed.append(name)
        if check:
            continue
        if in_place:
            if result != source:
                path.write_text(result, encoding="utf-8")
        elif output:
            Path(output).write_text(result, encoding="utf-8")
        else:
            click.echo(result, nl=False)

    if check:
        for name in changed:
            click.echo(f"would transform {name}")
        sys.exit(1 if changed else 0)
