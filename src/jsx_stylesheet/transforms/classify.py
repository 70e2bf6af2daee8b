"""Attribute classifier: decide how an element's class names can be resolved."""

from __future__ import annotations

from jsx_stylesheet.catalog import CLASS_NAME_ATTRIBUTE, STYLE_ATTRIBUTE
from jsx_stylesheet.model.module import JSXAttribute, JSXElement, Span
from jsx_stylesheet.model.stylesheet import (
    Classification,
    ClassNameValue,
    StyleAttributeState,
)
from jsx_stylesheet.parser.transformer import parse_value_shape

__all__ = ["classify_element"]

# A valueless JSX attribute (`<div className />`) means `true`.
_IMPLICIT_TRUE = "true"


def classify_element(element: JSXElement, source: str) -> Classification | None:
    """Classify *element*'s class-name and style attributes.

    Returns ``None`` when the element has neither. Classification only reads
    the source; nothing is evaluated.
    """
    class_attribute = element.get_attribute(CLASS_NAME_ATTRIBUTE)
    style_attribute = element.get_attribute(STYLE_ATTRIBUTE)
    if class_attribute is None and style_attribute is None:
        return None
    return Classification(
        class_attribute=class_attribute,
        class_value=_class_name_value(class_attribute, source) if class_attribute else None,
        style_attribute=style_attribute,
        style=_style_state(style_attribute, source) if style_attribute else StyleAttributeState(),
    )


def _static(text: str) -> ClassNameValue:
    return ClassNameValue(tokens=tuple(text.split()))


def _class_name_value(attribute: JSXAttribute, source: str) -> ClassNameValue:
    value = attribute.value
    if value is None:
        return ClassNameValue(expression=_IMPLICIT_TRUE)
    if value.kind == "string":
        return _static(value.span.text(source)[1:-1])
    if value.kind == "expression" and value.expression is not None:
        shape = parse_value_shape(value.expression.text(source))
        if shape is not None and shape.is_static_string:
            return _static(shape.text or "")
    return ClassNameValue(expression=value.code)


def _style_state(attribute: JSXAttribute, source: str) -> StyleAttributeState:
    value = attribute.value
    if value is None:
        return StyleAttributeState(expression=_IMPLICIT_TRUE)
    if value.kind == "expression" and value.expression is not None:
        shape = parse_value_shape(value.expression.text(source))
        if shape is not None and shape.is_array and shape.inner is not None:
            base = value.expression.start
            elements = _strip(source, Span(base + shape.inner[0], base + shape.inner[1]))
            return StyleAttributeState(expression=value.expression, array_elements=elements)
    return StyleAttributeState(expression=value.code)


def _strip(source: str, span: Span) -> Span:
    start, end = span.start, span.end
    while start < end and source[start].isspace():
        start += 1
    while end > start and source[end - 1].isspace():
        end -= 1
    return Span(start, end)
