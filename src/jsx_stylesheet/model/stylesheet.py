"""Stylesheet binding model: imports, accessor, classifications and flags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from jsx_stylesheet.catalog import MERGE_STYLES_NAME
from jsx_stylesheet.model.module import Fragment, JSXAttribute, Span


@dataclass(frozen=True)
class StylesheetImport:
    """A module-level import of a stylesheet file.

    Attributes:
        source_path: The import specifier, e.g. ``./app.css``.
        local_binding_name: Identifier the stylesheet mapping is reachable by.
        is_default_binding: True when the author bound the import themselves
            (``import styles from './style.css'``); such imports pass through
            untouched and are never merged into the accessor.
    """

    source_path: str
    local_binding_name: str
    is_default_binding: bool


@dataclass(frozen=True)
class StylesheetAccessor:
    """The single expression a module uses to reach its resolved styles."""

    bindings: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.bindings:
            raise ValueError("StylesheetAccessor needs at least one binding")

    @property
    def needs_merge(self) -> bool:
        return len(self.bindings) > 1

    @property
    def expression(self) -> str:
        if self.needs_merge:
            return f"{MERGE_STYLES_NAME}({', '.join(self.bindings)})"
        return self.bindings[0]


@dataclass
class HelperInjectionFlags:
    """Which catalog helpers a module needs. Flags only ever turn on."""

    needs_merge_helper: bool = False
    needs_get_style_helper: bool = False

    def require_merge(self) -> None:
        self.needs_merge_helper = True

    def require_get_style(self) -> None:
        self.needs_get_style_helper = True


class ClassNameShape(Enum):
    """Syntactic form of a class-name attribute value."""

    STATIC = "static"
    DYNAMIC = "dynamic"


@dataclass(frozen=True)
class ClassNameValue:
    """A classified class-name value.

    ``tokens`` holds the whitespace-split class names of a static value;
    ``expression`` holds the opaque code of a dynamic one. A value with an
    expression is dynamic.
    """

    tokens: tuple[str, ...] = ()
    expression: Fragment | None = None

    @property
    def shape(self) -> ClassNameShape:
        if self.expression is None:
            return ClassNameShape.STATIC
        return ClassNameShape.DYNAMIC

    @property
    def is_empty(self) -> bool:
        return self.expression is None and not self.tokens


@dataclass(frozen=True)
class StyleAttributeState:
    """The inline style attribute of an element, if any."""

    expression: Fragment | None = None
    # Span of the elements of an array literal, when the style is one.
    array_elements: Span | None = None

    @property
    def present(self) -> bool:
        return self.expression is not None

    @property
    def is_array(self) -> bool:
        return self.array_elements is not None


@dataclass(frozen=True)
class Classification:
    """Read-only analysis of one element's class-name and style attributes."""

    class_attribute: JSXAttribute | None
    class_value: ClassNameValue | None
    style_attribute: JSXAttribute | None
    style: StyleAttributeState

    @property
    def has_class_name(self) -> bool:
        return self.class_attribute is not None
