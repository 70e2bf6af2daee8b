"""Python reference for the injected runtime helpers.

``merge_styles`` and ``get_style`` follow ``_mergeStyles`` and ``_getStyle``
from :mod:`jsx_stylesheet.catalog` step for step, so the semantics of the
emitted JavaScript can be checked (and previewed) without a JS engine.
Stylesheets are mappings of class name to style mapping, as produced by the
stylesheet loader.
"""

from __future__ import annotations

from typing import Any, Mapping

Style = dict[str, Any]
StyleSheet = Mapping[str, Mapping[str, Any]]


def merge_styles(*sheets: StyleSheet) -> dict[str, Mapping[str, Any]]:
    """Shallow union of stylesheets; later sheets win on shared class names."""
    merged: dict[str, Mapping[str, Any]] = {}
    for sheet in sheets:
        merged.update(sheet)
    return merged


def resolve_class_names(text: str, stylesheet: StyleSheet) -> Style:
    """Resolve a whitespace-separated class string, later classes winning."""
    style: Style = {}
    for name in text.split():
        style.update(stylesheet.get(name) or {})
    return style


def get_style(value: Any, stylesheet: StyleSheet) -> Any:
    """Resolve a runtime class-name value to a style.

    - a string is split on whitespace and looked up class by class;
    - a list or tuple is resolved item by item, left to right;
    - a mapping resolves the class names whose value is truthy, in order;
    - anything else is returned unchanged.
    """
    if isinstance(value, str):
        return resolve_class_names(value, stylesheet)
    if isinstance(value, (list, tuple)):
        style: Style = {}
        for item in value:
            resolved = get_style(item, stylesheet)
            if isinstance(resolved, Mapping):
                style.update(resolved)
        return style
    if isinstance(value, Mapping):
        style = {}
        for name, enabled in value.items():
            if enabled:
                style.update(get_style(str(name), stylesheet))
        return style
    return value
