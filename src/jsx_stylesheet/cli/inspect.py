"""CLI command: jsx-stylesheet inspect -- show how a module would be resolved."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from jsx_stylesheet.cli.transform import build_config
from jsx_stylesheet.model.module import Fragment, Module
from jsx_stylesheet.model.stylesheet import ClassNameShape, Classification
from jsx_stylesheet.parser import ParseError, parse_module
from jsx_stylesheet.transforms.classify import classify_element
from jsx_stylesheet.transforms.imports import normalize_imports


def _code(module: Module, fragment: Fragment | None) -> str:
    if fragment is None:
        return ""
    text = fragment if isinstance(fragment, str) else fragment.text(module.source)
    text = " ".join(text.split())
    return text[:50] + "..." if len(text) > 50 else text


def _describe(module: Module, classification: Classification) -> str:
    parts = []
    value = classification.class_value
    if value is None:
        parts.append("className=none")
    elif value.is_empty:
        parts.append("className=empty")
    elif value.shape is ClassNameShape.STATIC:
        parts.append(f"className=static{list(value.tokens)}")
    else:
        parts.append(f"className=dynamic({_code(module, value.expression)})")

    style = classification.style
    if not style.present:
        parts.append("style=none")
    elif style.is_array:
        parts.append(f"style=array({_code(module, style.array_elements)})")
    else:
        parts.append(f"style={_code(module, style.expression)}")
    return "  ".join(parts)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--extension",
    "extensions",
    multiple=True,
    help="Stylesheet file extension (repeatable); replaces the default set.",
)
def inspect(file: str, extensions: tuple[str, ...]) -> None:
    """Parse a module and display its stylesheet imports and class usage.

    Shows every stylesheet import, the accessor expression the module would
    bind, and the classification of each element with a className or style.
    """
    path = Path(file)

    try:
        module = parse_module(path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    imports = normalize_imports(module, build_config(False, extensions, None))

    click.echo(f"Module:   {path.name}")
    click.echo(f"Imports:  {len(module.imports)}")
    click.echo(f"Elements: {len(module.elements)}")
    click.echo()

    click.echo("Stylesheets:")
    for stylesheet in imports.stylesheets:
        note = "  (author binding, not merged)" if stylesheet.is_default_binding else ""
        click.echo(f"  {stylesheet.source_path} -> {stylesheet.local_binding_name}{note}")
    accessor = imports.accessor
    click.echo(f"Accessor: {accessor.expression if accessor else '(none; module is left unchanged)'}")
    click.echo()

    click.echo("Elements:")
    for element in module.elements:
        classification = classify_element(element, module.source)
        if classification is None:
            continue
        line = module.line_of(element.span.start)
        click.echo(f"  <{element.name}> line {line}  {_describe(module, classification)}")
