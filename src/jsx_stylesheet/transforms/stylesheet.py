"""Stylesheet binding transform: resolve class names against imported stylesheets."""

from __future__ import annotations

import logging

from jsx_stylesheet.catalog import (
    GET_STYLE_FUNCTION,
    MERGE_STYLES_FUNCTION,
    style_sheet_declaration,
)
from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.module import Module
from jsx_stylesheet.model.stylesheet import HelperInjectionFlags, StylesheetAccessor
from jsx_stylesheet.transforms.classify import classify_element
from jsx_stylesheet.transforms.imports import normalize_imports
from jsx_stylesheet.transforms.resolve import resolve_element

logger = logging.getLogger("jsx_stylesheet")


def build_prelude(accessor: StylesheetAccessor, flags: HelperInjectionFlags) -> list[str]:
    """Statements inserted after the import block, in their fixed order."""
    prelude: list[str] = []
    if flags.needs_merge_helper:
        prelude.append(MERGE_STYLES_FUNCTION)
    if flags.needs_get_style_helper:
        prelude.append(GET_STYLE_FUNCTION)
    prelude.append(style_sheet_declaration(accessor.expression))
    return prelude


class StylesheetTransform:
    """Rewrite ``className`` attributes into resolved ``style`` attributes.

    Modules without a side-effect stylesheet import are returned untouched.
    Otherwise every element is classified and resolved in document order,
    then the helpers the module needs and the single ``_styleSheet``
    declaration are inserted after the last import.
    """

    def __init__(self, config: TransformConfig | None = None) -> None:
        self.config = config or TransformConfig()

    def apply(self, module: Module) -> Module:
        imports = normalize_imports(module, self.config)
        accessor = imports.accessor
        if accessor is None:
            logger.info("No stylesheet import to bind; module left unchanged")
            return module

        for stylesheet in imports.stylesheets:
            logger.debug(
                "Stylesheet import %s bound as %s%s",
                stylesheet.source_path,
                stylesheet.local_binding_name,
                " (author binding)" if stylesheet.is_default_binding else "",
            )

        flags = HelperInjectionFlags()
        if accessor.needs_merge:
            flags.require_merge()

        rewritten = 0
        for element in module.elements:
            classification = classify_element(element, module.source)
            if classification is None:
                continue
            resolve_element(element, classification, flags, self.config)
            if element.is_dirty:
                rewritten += 1
                logger.debug("Rewrote <%s> at offset %d", element.name, element.span.start)

        module.prelude = build_prelude(accessor, flags)
        logger.info(
            "Bound %d stylesheet(s), rewrote %d element(s), helpers: merge=%s getStyle=%s",
            len(accessor.bindings),
            rewritten,
            flags.needs_merge_helper,
            flags.needs_get_style_helper,
        )
        return module
