"""Lark Transformers for import declarations and attribute value shapes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from jsx_stylesheet.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


@dataclass(frozen=True)
class ImportClause:
    """Bindings introduced by one import declaration."""

    source: str
    default: str | None = None
    namespace: str | None = None
    named: tuple[tuple[str, str], ...] = ()  # (imported, local)

    @property
    def local_names(self) -> list[str]:
        names = [n for n in (self.default, self.namespace) if n]
        names.extend(local for _, local in self.named)
        return names


@dataclass(frozen=True)
class ValueShape:
    """Top-level syntactic shape of an attribute value expression.

    Offsets are relative to the parsed text.

    Attributes:
        kind: ``string``, ``template``, ``array``, ``object``, ``group``,
            ``atom`` or ``other`` (several top-level terms).
        start: Offset of the first character of the expression.
        end: Offset just past the expression.
        text: Decoded contents of a string literal, or of a template literal
            without interpolation. ``None`` otherwise.
        inner: ``(start, end)`` of the elements of an array literal.
        elements: Number of elements in an array literal.
    """

    kind: str
    start: int
    end: int
    text: str | None = None
    inner: tuple[int, int] | None = None
    elements: int = 0

    @property
    def is_static_string(self) -> bool:
        return self.kind in ("string", "template") and self.text is not None

    @property
    def is_array(self) -> bool:
        return self.kind == "array"


# ---------------------------------------------------------------------------
# String literal decoding
# ---------------------------------------------------------------------------

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def _decode_escape(match: re.Match[str]) -> str:
    seq = match.group(1)
    if seq.startswith("u{"):
        return chr(int(seq[2:-1], 16))
    if seq[0] in "ux" and len(seq) > 1:
        return chr(int(seq[1:], 16))
    if seq in ("\n", "\r\n", "\r", "\u2028", "\u2029"):
        # Line continuation.
        return ""
    return _SIMPLE_ESCAPES.get(seq, seq)


def decode_string(raw: str) -> str:
    """Decode a quoted JavaScript string or template literal body."""
    return _ESCAPE_RE.sub(_decode_escape, raw[1:-1])


# ---------------------------------------------------------------------------
# Transformers
# ---------------------------------------------------------------------------


class ImportTransformer(Transformer):  # type: ignore[type-arg]
    """Transform an ``import_decl`` parse tree into an :class:`ImportClause`."""

    def side_effect_import(self, items: list[object]) -> ImportClause:
        source = next(t for t in items if isinstance(t, Token) and t.type == "STRING")
        return ImportClause(source=decode_string(str(source)))

    def binding_import(self, items: list[object]) -> ImportClause:
        clause = next(i for i in items if isinstance(i, dict))
        source = next(t for t in items if isinstance(t, Token) and t.type == "STRING")
        return ImportClause(source=decode_string(str(source)), **clause)

    # ---- clauses ----

    def default_binding(self, items: list[object]) -> dict[str, object]:
        return {"default": _first_name(items)}

    def default_and_namespace(self, items: list[object]) -> dict[str, object]:
        namespace = next(i for i in items if isinstance(i, dict))
        return {"default": _first_name(items), **namespace}

    def default_and_named(self, items: list[object]) -> dict[str, object]:
        named = next(i for i in items if isinstance(i, dict))
        return {"default": _first_name(items), **named}

    def import_clause(self, items: list[object]) -> dict[str, object]:
        return next(i for i in items if isinstance(i, dict))

    def namespace_import(self, items: list[object]) -> dict[str, object]:
        return {"namespace": _first_name(items)}

    def named_imports(self, items: list[object]) -> dict[str, object]:
        specifiers = tuple(i for i in items if isinstance(i, tuple))
        return {"named": specifiers}

    def import_specifier(self, items: list[object]) -> tuple[str, str]:
        imported_token = items[0]
        imported = str(imported_token)
        if isinstance(imported_token, Token) and imported_token.type == "STRING":
            imported = decode_string(imported)
        local = str(items[1]) if len(items) > 1 and items[1] is not None else imported
        return (imported, local)


def _first_name(items: list[object]) -> str:
    return str(next(t for t in items if isinstance(t, Token) and t.type == "NAME"))


class ValueShapeTransformer(Transformer):  # type: ignore[type-arg]
    """Reduce a ``value`` token tree to its top-level :class:`ValueShape`."""

    def string(self, items: list[Token]) -> ValueShape:
        token = items[0]
        return ValueShape(
            "string", token.start_pos, token.end_pos, text=decode_string(str(token))
        )

    def template(self, items: list[Token]) -> ValueShape:
        token = items[0]
        raw = str(token)
        # Any substitution makes the template dynamic.
        text = None if "${" in raw else decode_string(raw)
        return ValueShape("template", token.start_pos, token.end_pos, text=text)

    def array(self, items: list[object]) -> ValueShape:
        open_, close = items[0], items[-1]
        return ValueShape(
            "array",
            open_.start_pos,  # type: ignore[union-attr]
            close.end_pos,  # type: ignore[union-attr]
            inner=(open_.end_pos, close.start_pos),  # type: ignore[union-attr]
            elements=_count_elements(items[1:-1]),
        )

    def object(self, items: list[Token]) -> ValueShape:
        return _bracketed("object", items)

    def group(self, items: list[Token]) -> ValueShape:
        return _bracketed("group", items)

    def atom(self, items: list[Token]) -> ValueShape:
        token = items[0]
        return ValueShape("atom", token.start_pos, token.end_pos)

    def value(self, items: list[ValueShape]) -> ValueShape:
        if len(items) == 1:
            return items[0]
        return ValueShape("other", items[0].start, items[-1].end)


def _bracketed(kind: str, items: list[object]) -> ValueShape:
    return ValueShape(kind, items[0].start_pos, items[-1].end_pos)  # type: ignore[union-attr]


def _count_elements(inner: list[object]) -> int:
    """Count comma-separated, non-empty slots (holes and trailing commas excluded)."""
    count = 0
    pending = False
    for item in inner:
        if isinstance(item, Token) and item.type == "COMMA":
            count += pending
            pending = False
        else:
            pending = True
    return count + pending


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start=["import_decl", "value"],
    )


def parse_import(text: str) -> ImportClause:
    """Parse the text of one import declaration."""
    try:
        tree = _parser().parse(text, start="import_decl")
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(f"Malformed import declaration: {e}", line=line, column=column) from e
    return ImportTransformer().transform(tree)


def parse_value_shape(text: str) -> ValueShape | None:
    """Classify an attribute value expression.

    Returns ``None`` when the text is not something the value grammar
    understands; callers treat that as an opaque expression.
    """
    if not text.strip():
        return None
    try:
        tree = _parser().parse(text, start="value")
        return ValueShapeTransformer().transform(tree)
    except LarkError:
        return None
