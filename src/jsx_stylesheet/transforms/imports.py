"""Stylesheet import normalizer: find stylesheet imports and bind them."""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field

from jsx_stylesheet.catalog import BINDING_SUFFIX
from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.module import Module
from jsx_stylesheet.model.stylesheet import StylesheetAccessor, StylesheetImport

__all__ = ["NormalizedImports", "binding_name", "normalize_imports"]

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class NormalizedImports:
    """Result of scanning a module's imports.

    ``stylesheets`` lists every recognized stylesheet import in source order,
    named ones included; ``accessor`` is ``None`` when the module has no
    side-effect stylesheet import to bind.
    """

    stylesheets: list[StylesheetImport] = field(default_factory=list)
    accessor: StylesheetAccessor | None = None


def binding_name(source_path: str) -> str:
    """Identifier for a side-effect stylesheet import: ``./my-app.css`` -> ``myAppStyleSheet``."""
    path = source_path.split("?", 1)[0].split("#", 1)[0]
    stem, _ = posixpath.splitext(posixpath.basename(path))
    words = _WORD_RE.findall(stem)
    if not words:
        return BINDING_SUFFIX[0].lower() + BINDING_SUFFIX[1:]
    name = words[0][0].lower() + words[0][1:] + "".join(w[0].upper() + w[1:] for w in words[1:])
    if name[0].isdigit():
        name = "_" + name
    return name + BINDING_SUFFIX


def _unique(name: str, taken: set[str]) -> str:
    candidate = name
    counter = 2
    while candidate in taken:
        candidate = f"{name}{counter}"
        counter += 1
    return candidate


def normalize_imports(module: Module, config: TransformConfig) -> NormalizedImports:
    """Scan top-level imports, binding side-effect stylesheet imports.

    ``import './app.css'`` becomes ``import appStyleSheet from './app.css'``.
    Imports the author already bound are reported but left alone, and a
    path imported for side effects twice is bound only once.
    """
    stylesheets: list[StylesheetImport] = []
    bindings: dict[str, str] = {}
    taken = module.bound_names()

    for decl in module.imports:
        if decl.type_only or not config.is_stylesheet(decl.source):
            continue
        if not decl.is_side_effect:
            stylesheets.append(
                StylesheetImport(decl.source, decl.local_binding or "", is_default_binding=True)
            )
            continue
        if decl.source in bindings:
            continue
        name = _unique(binding_name(decl.source), taken)
        taken.add(name)
        decl.rewritten_binding = name
        bindings[decl.source] = name
        stylesheets.append(StylesheetImport(decl.source, name, is_default_binding=False))

    if not bindings:
        return NormalizedImports(stylesheets=stylesheets)
    return NormalizedImports(
        stylesheets=stylesheets,
        accessor=StylesheetAccessor(tuple(bindings.values())),
    )
