"""Compile-time resolution of JSX class names against imported stylesheets."""

from __future__ import annotations

from pathlib import Path

from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.parser import ParseError, parse_module
from jsx_stylesheet.transforms import apply_transforms

__version__ = "0.1.0"

__all__ = ["ParseError", "TransformConfig", "transform_file", "transform_source"]


def transform_source(source: str, config: TransformConfig | None = None) -> str:
    """Parse, transform and print one module."""
    module = apply_transforms(parse_module(source), config)
    return module.to_source()


def transform_file(path: str | Path, config: TransformConfig | None = None) -> str:
    """Transform the module stored at *path*; the file itself is not written."""
    return transform_source(Path(path).read_text(encoding="utf-8"), config)
