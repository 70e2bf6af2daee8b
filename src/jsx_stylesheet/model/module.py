"""Syntax tree model: imports, JSX elements and attributes of one module.

The tree keeps offsets into the original source instead of re-encoding
every token. Nodes the pass mutates are printed from their new state; the
rest of the module is copied verbatim, so an untouched module prints back
byte for byte.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, Union


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` range of source offsets."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Invalid span: {self.start} > {self.end}")

    def text(self, source: str) -> str:
        return source[self.start : self.end]


# A piece of generated code: literal text or a range of the original source.
Fragment = Union[str, Span]


@dataclass
class ImportDeclaration:
    """A top-level ``import`` statement."""

    span: Span
    keyword_end: int
    source_span: Span
    source: str
    default_binding: str | None = None
    namespace: str | None = None
    named: tuple[tuple[str, str], ...] = ()
    type_only: bool = False
    # Default binding introduced by the pass for a side-effect import.
    rewritten_binding: str | None = None

    @property
    def is_side_effect(self) -> bool:
        return not (self.default_binding or self.namespace or self.named)

    @property
    def local_binding(self) -> str | None:
        """The name user code reaches this import through, if any."""
        if self.rewritten_binding:
            return self.rewritten_binding
        if self.default_binding or self.namespace:
            return self.default_binding or self.namespace
        if self.named:
            return self.named[0][1]
        return None

    @property
    def local_names(self) -> list[str]:
        names = [n for n in (self.default_binding, self.namespace, self.rewritten_binding) if n]
        names.extend(local for _, local in self.named)
        return names


@dataclass(frozen=True)
class AttributeValue:
    """The right-hand side of a JSX attribute.

    Attributes:
        kind: ``string`` (quoted), ``expression`` (``{...}`` container) or
            ``element`` (a nested JSX element).
        span: The whole value, including quotes or braces.
        expression: For containers, the code between the braces.
    """

    kind: str
    span: Span
    expression: Span | None = None

    @property
    def code(self) -> Span:
        """The value as a JavaScript expression."""
        if self.kind == "expression" and self.expression is not None:
            return self.expression
        return self.span


@dataclass(frozen=True)
class JSXAttribute:
    """One attribute of a JSX opening element.

    Parsed attributes carry their source ``span``; ``name`` may differ from
    ``source_name`` once renamed. Synthesized attributes have no span and
    carry their value as ``code`` fragments instead.
    """

    name: str | None
    span: Span | None = None
    source_name: str | None = None
    value: AttributeValue | None = None
    code: tuple[Fragment, ...] | None = None

    @property
    def is_spread(self) -> bool:
        return self.name is None

    @property
    def is_synthesized(self) -> bool:
        return self.code is not None

    def renamed(self, name: str) -> JSXAttribute:
        return JSXAttribute(
            name=name,
            span=self.span,
            source_name=self.source_name,
            value=self.value,
            code=self.code,
        )

    @classmethod
    def synthesize(cls, name: str, code: list[Fragment]) -> JSXAttribute:
        return cls(name=name, code=tuple(code))


@dataclass
class JSXElement:
    """A JSX element or fragment and its attribute list."""

    name: str
    span: Span
    name_end: int
    attributes: list[JSXAttribute] = field(default_factory=list)
    self_closing: bool = False
    original_attributes: tuple[JSXAttribute, ...] = ()
    # End of the last parsed attribute; None when the element had none.
    attributes_end: int | None = None

    @property
    def is_fragment(self) -> bool:
        return self.name == ""

    @property
    def is_dirty(self) -> bool:
        return tuple(self.attributes) != self.original_attributes

    def get_attribute(self, name: str) -> JSXAttribute | None:
        """Return the last attribute called *name*, as JSX semantics do."""
        found = None
        for attr in self.attributes:
            if attr.name == name:
                found = attr
        return found

    @property
    def attribute_region(self) -> Span:
        """Range replaced when the attribute list is printed anew."""
        if self.attributes_end is None:
            return Span(self.name_end, self.name_end)
        return Span(self.name_end, self.attributes_end)


@dataclass
class Module:
    """A parsed JavaScript module."""

    source: str
    imports: list[ImportDeclaration] = field(default_factory=list)
    elements: list[JSXElement] = field(default_factory=list)
    # Statements inserted after the import block, in order.
    prelude: list[str] = field(default_factory=list)

    @property
    def last_import(self) -> ImportDeclaration | None:
        return self.imports[-1] if self.imports else None

    def bound_names(self) -> set[str]:
        """Names bound by the module's import declarations."""
        names: set[str] = set()
        for decl in self.imports:
            names.update(decl.local_names)
        return names

    def line_of(self, offset: int) -> int:
        return self.source.count("\n", 0, offset) + 1

    def prelude_offset(self) -> int:
        """Where inserted statements go: the end of the last import's line."""
        last = self.last_import
        if last is None:
            return 0
        end = last.span.end
        newline = self.source.find("\n", end)
        if newline == -1:
            newline = len(self.source)
        rest = self.source[end:newline].strip()
        if not rest or rest.startswith("//"):
            return newline
        return end

    def to_source(self) -> str:
        """Print the module, applying every pending change."""
        return _Printer(self).render(Span(0, len(self.source)))


# ---------------------------------------------------------------------------
# Printer
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class _Edit:
    span: Span
    produce: Callable[[_Printer], str]


class _Printer:
    """Render source ranges with nested edits applied."""

    def __init__(self, module: Module) -> None:
        self.module = module
        self.source = module.source
        edits = list(self._collect_edits())
        self.edits = sorted(edits, key=lambda e: (e.span.start, -e.span.end))

    def _collect_edits(self) -> Iterator[_Edit]:
        for decl in self.module.imports:
            if decl.rewritten_binding:
                binding = decl.rewritten_binding
                yield _Edit(
                    Span(decl.keyword_end, decl.source_span.start),
                    lambda p, b=binding: f" {b} from ",
                )
        for element in self.module.elements:
            if element.is_dirty:
                yield _Edit(
                    element.attribute_region,
                    lambda p, el=element: "".join(
                        " " + p.attribute(attr) for attr in el.attributes
                    ),
                )
        if self.module.prelude:
            offset = self.module.prelude_offset()
            text = "\n\n" + "\n\n".join(self.module.prelude)
            if offset == 0:
                text = "\n\n".join(self.module.prelude) + "\n\n"
            yield _Edit(Span(offset, offset), lambda p, t=text: t)

    def render(self, span: Span) -> str:
        out: list[str] = []
        cursor = span.start
        for edit in self.edits:
            if edit.span.start < cursor or edit.span.end > span.end:
                continue
            if edit.span.start == edit.span.end == span.end and span.end != len(self.source):
                continue
            out.append(self.source[cursor : edit.span.start])
            out.append(edit.produce(self))
            cursor = edit.span.end
        out.append(self.source[cursor : span.end])
        return "".join(out)

    def fragments(self, code: tuple[Fragment, ...]) -> str:
        return "".join(f if isinstance(f, str) else self.render(f) for f in code)

    def attribute(self, attr: JSXAttribute) -> str:
        if attr.code is not None:
            return f"{attr.name}={{{self.fragments(attr.code)}}}"
        if attr.span is None:
            raise ValueError(f"Attribute {attr.name!r} has neither source text nor code")
        if attr.name != attr.source_name and attr.name is not None:
            name_end = attr.span.start + len(attr.source_name or "")
            return attr.name + self.render(Span(name_end, attr.span.end))
        return self.render(attr.span)
