from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

DEFAULT_STYLESHEET_EXTENSIONS = frozenset({".css", ".scss", ".less", ".sass"})
DEVELOPMENT = "development"


def _environment_mode() -> str:
    return os.environ.get("NODE_ENV", "")


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Lower-case extensions and give each a leading dot."""
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext or ext == ".":
            raise ValueError(f"Invalid stylesheet extension: {ext!r}")
        normalized.add(ext if ext.startswith(".") else "." + ext)
    return frozenset(normalized)


@dataclass(frozen=True)
class TransformConfig:
    retain_class_name: bool = False
    stylesheet_extensions: frozenset[str] = DEFAULT_STYLESHEET_EXTENSIONS
    environment_mode: str = field(default_factory=_environment_mode)

    def __post_init__(self) -> None:
        extensions = normalize_extensions(self.stylesheet_extensions)
        if not extensions:
            raise ValueError("At least one stylesheet extension is required")
        object.__setattr__(self, "stylesheet_extensions", extensions)

    @property
    def is_development(self) -> bool:
        return self.environment_mode == DEVELOPMENT

    def is_stylesheet(self, source_path: str) -> bool:
        """Whether an import specifier names a stylesheet file."""
        path = source_path.split("?", 1)[0].split("#", 1)[0]
        _, ext = os.path.splitext(path)
        return ext.lower() in self.stylesheet_extensions

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> TransformConfig:
        """Build a config from host-style plugin options.

        Accepts ``retainClassName``, ``styleSheetExtensions`` (or
        ``extensions``) and ``environmentMode``, as well as the field names.
        """
        kwargs: dict[str, Any] = {}
        for key in ("retain_class_name", "retainClassName"):
            if key in options:
                kwargs["retain_class_name"] = bool(options[key])
        for key in ("stylesheet_extensions", "styleSheetExtensions", "extensions"):
            if key in options:
                value = options[key]
                kwargs["stylesheet_extensions"] = [value] if isinstance(value, str) else value
        for key in ("environment_mode", "environmentMode"):
            if key in options:
                kwargs["environment_mode"] = str(options[key])
        return cls(**kwargs)
