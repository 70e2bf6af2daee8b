from jsx_stylesheet.model.module import (
    AttributeValue,
    Fragment,
    ImportDeclaration,
    JSXAttribute,
    JSXElement,
    Module,
    Span,
)
from jsx_stylesheet.model.stylesheet import (
    Classification,
    ClassNameShape,
    ClassNameValue,
    HelperInjectionFlags,
    StyleAttributeState,
    StylesheetAccessor,
    StylesheetImport,
)

__all__ = [
    "AttributeValue",
    "Classification",
    "ClassNameShape",
    "ClassNameValue",
    "Fragment",
    "HelperInjectionFlags",
    "ImportDeclaration",
    "JSXAttribute",
    "JSXElement",
    "Module",
    "Span",
    "StyleAttributeState",
    "StylesheetAccessor",
    "StylesheetImport",
]
