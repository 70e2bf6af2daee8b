"""Attribute resolver: build the replacement style value and rewrite attributes."""

from __future__ import annotations

import json

from jsx_stylesheet.catalog import (
    CLASS_NAME_ATTRIBUTE,
    DEBUG_CLASS_ATTRIBUTE,
    GET_STYLE_NAME,
    STYLE_ATTRIBUTE,
    STYLE_SHEET_NAME,
)
from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.module import Fragment, JSXAttribute, JSXElement
from jsx_stylesheet.model.stylesheet import (
    Classification,
    HelperInjectionFlags,
)

__all__ = ["resolve_element", "style_code"]


def _lookup(token: str) -> str:
    return f"{STYLE_SHEET_NAME}[{json.dumps(token, ensure_ascii=False)}]"


def _join(items: list[list[Fragment]]) -> list[Fragment]:
    joined: list[Fragment] = []
    for index, item in enumerate(items):
        if index:
            joined.append(", ")
        joined.extend(item)
    return joined


def style_code(
    classification: Classification, flags: HelperInjectionFlags
) -> list[Fragment] | None:
    """Build the style expression for a classified element.

    Returns ``None`` when there is nothing to emit: no class name, or an
    empty one.
    """
    value = classification.class_value
    if value is None or value.is_empty:
        return None

    entries: list[list[Fragment]]
    if value.expression is None:
        entries = [[_lookup(token)] for token in value.tokens]
    else:
        flags.require_get_style()
        entries = [[f"{GET_STYLE_NAME}(", value.expression, ")"]]

    style = classification.style
    if style.is_array:
        # The host merges style arrays itself; class entries go first.
        elements = style.array_elements
        if elements is not None and elements.start < elements.end:
            entries.append([elements])
        return ["[", *_join(entries), "]"]

    if style.expression is None and len(entries) == 1:
        return entries[0]

    items: list[list[Fragment]] = [["{}"], *entries]
    if style.expression is not None:
        items.append([style.expression])
    return ["Object.assign(", *_join(items), ")"]


def resolve_element(
    element: JSXElement,
    classification: Classification,
    flags: HelperInjectionFlags,
    config: TransformConfig,
) -> None:
    """Replace *element*'s class-name attribute with a resolved style attribute.

    An element with only a style attribute is left alone. Otherwise every
    class-name attribute is dropped (kept when ``retain_class_name`` is set,
    renamed to ``__class`` in development mode); only the last one, the one
    JSX itself would use, is resolved. The style attribute is replaced in
    place, or appended when the element had none.
    """
    if not classification.has_class_name:
        return

    code = style_code(classification, flags)
    attributes: list[JSXAttribute] = []
    for attribute in element.attributes:
        if attribute.name == CLASS_NAME_ATTRIBUTE:
            if code is None:
                continue
            if config.retain_class_name:
                attributes.append(attribute)
            elif config.is_development:
                attributes.append(attribute.renamed(DEBUG_CLASS_ATTRIBUTE))
        elif attribute is classification.style_attribute and code is not None:
            attributes.append(JSXAttribute.synthesize(STYLE_ATTRIBUTE, code))
        else:
            attributes.append(attribute)

    if code is not None and classification.style_attribute is None:
        attributes.append(JSXAttribute.synthesize(STYLE_ATTRIBUTE, code))
    element.attributes = attributes
