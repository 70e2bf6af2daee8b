"""Base protocol for module transforms."""

from __future__ import annotations

from typing import Protocol

from jsx_stylesheet.model.module import Module


class Transform(Protocol):
    """A module-to-module transformation step."""

    def apply(self, module: Module) -> Module: ...
