from __future__ import annotations

from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.module import Module
from jsx_stylesheet.transforms.base import Transform
from jsx_stylesheet.transforms.stylesheet import StylesheetTransform

__all__ = ["StylesheetTransform", "Transform", "apply_transforms"]


def apply_transforms(
    module: Module,
    config: TransformConfig | None = None,
    custom_transforms: list[Transform] | None = None,
) -> Module:
    """Apply the built-in transform (and any custom ones) to *module*."""
    transforms: list[Transform] = [StylesheetTransform(config)]
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        module = t.apply(module)
    return module
