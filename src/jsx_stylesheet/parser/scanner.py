"""Hand-written scanner that locates imports and JSX elements in a module.

The scanner does not build a full JavaScript syntax tree. It tokenizes just
enough (comments, strings, templates, regular expressions, brackets) to
find the two things the pass rewrites: top-level import declarations and
JSX elements with their attributes. Everything else stays source text.
"""

from __future__ import annotations

import re

from jsx_stylesheet.model.module import (
    AttributeValue,
    ImportDeclaration,
    JSXAttribute,
    JSXElement,
    Module,
    Span,
)
from jsx_stylesheet.parser.errors import ParseError
from jsx_stylesheet.parser.transformer import parse_import

__all__ = ["parse_module"]

_NAME_RE = re.compile(r"(?!\d)[\w$]+")
_NUMBER_RE = re.compile(
    r"(?:0[xXoObB][\da-fA-F_]+|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d[\d_]*)?)n?"
)
_STRING_RE = re.compile(r"""'(?:[^'\\\n]|\\[\s\S])*'|"(?:[^"\\\n]|\\[\s\S])*\"""")
_REGEX_RE = re.compile(r"/(?![*/])(?:[^/\\\[\n]|\\.|\[(?:[^\]\\\n]|\\.)*\])+/[A-Za-z]*")
_PUNCT_RE = re.compile(
    r">>>=|\.\.\.|===|!==|\*\*=|<<=|>>=|>>>|&&=|\|\|=|\?\?=|=>|==|!=|<=|>=|&&|\|\|"
    r"|\?\?|\?\.|\+\+|--|[+\-*/%&|^]=|\*\*|<<|>>|[;,<>+\-*/%&|^!~?:=.@#]"
)
_JSX_NAME_RE = re.compile(r"[A-Za-z_$][\w$\-]*(?:[:.][A-Za-z_$][\w$\-]*)*")
_JSX_ATTR_RE = re.compile(r"[A-Za-z_$][\w$\-]*(?::[A-Za-z_$][\w$\-]*)?")
_JSX_TEXT_RE = re.compile(r"[^{<]+")
_TYPE_IMPORT_RE = re.compile(r"import\s+type(?:of)?\s+(?!from\b)(?=[\w${*])")

_CLOSERS = {"(": ")", "[": "]", "{": "}"}

# Keywords after which an expression, and so a regex or JSX, may start.
_EXPRESSION_KEYWORDS = frozenset(
    {
        "return", "typeof", "instanceof", "in", "of", "new", "delete", "void",
        "throw", "case", "do", "else", "yield", "await", "export", "default",
        "extends",
    }
)

# Statement keywords whose parenthesized head is followed by a statement body.
_HEAD_KEYWORDS = frozenset({"if", "while", "for", "with"})


def _expression_allowed(prev: str) -> bool:
    """Whether the token after *prev* starts an expression.

    *prev* is ``""`` at the start of a code region, ``"value"`` after a
    literal, JSX element or postfix ``++``/``--``, ``"head"`` after the
    closing parenthesis of an ``if``/``while``/``for``/``with`` head,
    ``"name:<word>"`` after an identifier, or the punctuator text.
    """
    if prev in ("", "}"):
        return True
    if prev.startswith("name:"):
        return prev[5:] in _EXPRESSION_KEYWORDS
    return prev not in ("value", ")", "]")


class _Scanner:
    def __init__(self, source: str) -> None:
        self.source = source
        self.length = len(source)
        self.imports: list[ImportDeclaration] = []
        self.elements: list[JSXElement] = []

    def error(self, message: str, offset: int) -> ParseError:
        return ParseError.at(message, self.source, offset)

    def scan(self) -> Module:
        pos = 0
        if self.source.startswith("#!"):
            newline = self.source.find("\n")
            pos = self.length if newline == -1 else newline
        self.scan_code(pos, closer=None)
        return Module(source=self.source, imports=self.imports, elements=self.elements)

    # ---- lexical helpers ----

    def skip_trivia(self, pos: int) -> int:
        """Skip whitespace and comments."""
        src = self.source
        while pos < self.length:
            if src[pos].isspace():
                pos += 1
            elif src.startswith("//", pos):
                newline = src.find("\n", pos)
                pos = self.length if newline == -1 else newline
            elif src.startswith("/*", pos):
                close = src.find("*/", pos + 2)
                if close == -1:
                    raise self.error("Unterminated comment", pos)
                pos = close + 2
            else:
                break
        return pos

    def scan_string(self, pos: int) -> int:
        match = _STRING_RE.match(self.source, pos)
        if match is None:
            raise self.error("Unterminated string literal", pos)
        return match.end()

    def scan_template(self, start: int) -> int:
        src = self.source
        pos = start + 1
        while pos < self.length:
            ch = src[pos]
            if ch == "\\":
                pos += 2
            elif ch == "`":
                return pos + 1
            elif src.startswith("${", pos):
                pos = self.scan_code(pos + 2, closer="}") + 1
            else:
                pos += 1
        raise self.error("Unterminated template literal", start)

    # ---- code ----

    def scan_code(self, pos: int, closer: str | None) -> int:
        """Scan JavaScript code starting at *pos*.

        Returns the offset of *closer* when one is given, otherwise the end
        of the source.
        """
        src = self.source
        # Open brackets, each flagged when it opens a statement head.
        stack: list[tuple[str, bool]] = []
        prev = ""
        while True:
            pos = self.skip_trivia(pos)
            if pos >= self.length:
                if stack or closer is not None:
                    expected = _CLOSERS[stack[-1][0]] if stack else closer
                    raise self.error(f"Expected {expected!r} before end of input", pos)
                return pos
            ch = src[pos]
            if ch in "'\"":
                pos = self.scan_string(pos)
                prev = "value"
            elif ch == "`":
                pos = self.scan_template(pos)
                prev = "value"
            elif ch in _CLOSERS:
                head = ch == "(" and prev.startswith("name:") and prev[5:] in _HEAD_KEYWORDS
                stack.append((ch, head))
                prev = ch
                pos += 1
            elif ch in ")]}":
                if not stack:
                    if ch == closer:
                        return pos
                    raise self.error(f"Unexpected {ch!r}", pos)
                opener, head = stack.pop()
                if _CLOSERS[opener] != ch:
                    raise self.error(f"Expected {_CLOSERS[opener]!r}, found {ch!r}", pos)
                prev = "head" if head else ch
                pos += 1
            elif ch == "<" and _expression_allowed(prev) and self.jsx_starts(pos):
                pos = self.scan_element(pos).span.end
                prev = "value"
            elif ch == "/" and _expression_allowed(prev) and (regex := _REGEX_RE.match(src, pos)):
                pos = regex.end()
                prev = "value"
            elif ch.isdigit() or (ch == "." and src[pos + 1 : pos + 2].isdigit()):
                pos = _NUMBER_RE.match(src, pos).end()  # type: ignore[union-attr]
                prev = "value"
            elif match := _NAME_RE.match(src, pos):
                word = match.group()
                if (
                    word == "import"
                    and closer is None
                    and not stack
                    and prev != "."
                    and self.import_starts(match.end())
                ):
                    pos = self.scan_import(pos).span.end
                    prev = ";"
                    continue
                pos = match.end()
                prev = "name:" + word
            elif match := _PUNCT_RE.match(src, pos):
                pos = match.end()
                punct = match.group()
                if punct in ("++", "--") and not _expression_allowed(prev):
                    # Postfix: the operand stays a value.
                    prev = "value"
                else:
                    prev = punct
            else:
                pos += 1
                prev = "value"

    # ---- imports ----

    def import_starts(self, pos: int) -> bool:
        """``import`` followed by ``(`` or ``.`` is an expression, not a declaration."""
        pos = self.skip_trivia(pos)
        return pos < self.length and self.source[pos] not in "(."

    def scan_import(self, start: int) -> ImportDeclaration:
        src = self.source
        keyword_end = start + len("import")
        pos = self.skip_trivia(keyword_end)
        if src[pos : pos + 1] not in ("'", '"'):
            pos = self._find_module_specifier(pos, start)
        source_span = Span(pos, self.scan_string(pos))
        end = source_span.end

        # Import attributes: `with { type: "css" }` or the older `assert { ... }`.
        after = self.skip_trivia(end)
        keyword = _NAME_RE.match(src, after)
        if keyword and keyword.group() in ("with", "assert"):
            brace = self.skip_trivia(keyword.end())
            if src.startswith("{", brace):
                end = self.scan_code(brace + 1, closer="}") + 1

        semicolon = end
        while semicolon < self.length and src[semicolon] in " \t":
            semicolon += 1
        if src.startswith(";", semicolon):
            end = semicolon + 1

        if _TYPE_IMPORT_RE.match(src, start):
            decl = ImportDeclaration(
                span=Span(start, end),
                keyword_end=keyword_end,
                source_span=source_span,
                source=src[source_span.start + 1 : source_span.end - 1],
                type_only=True,
            )
        else:
            try:
                clause = parse_import(src[start : source_span.end])
            except ParseError as e:
                raise self.error(str(e), start) from e
            decl = ImportDeclaration(
                span=Span(start, end),
                keyword_end=keyword_end,
                source_span=source_span,
                source=clause.source,
                default_binding=clause.default,
                namespace=clause.namespace,
                named=clause.named,
            )
        self.imports.append(decl)
        return decl

    def _find_module_specifier(self, pos: int, start: int) -> int:
        """Walk an import clause up to the string after its ``from`` keyword."""
        src = self.source
        depth = 0
        seen_binding = False
        last = ""
        while True:
            pos = self.skip_trivia(pos)
            if pos >= self.length:
                raise self.error("Unterminated import declaration", start)
            ch = src[pos]
            if ch in "'\"":
                pos = self.scan_string(pos)
            elif ch == "{":
                depth += 1
                pos += 1
            elif ch == "}":
                depth -= 1
                pos += 1
            elif ch in "*,":
                pos += 1
            elif match := _NAME_RE.match(src, pos):
                word = match.group()
                pos = match.end()
                if word == "from" and depth == 0 and seen_binding and last != "as":
                    pos = self.skip_trivia(pos)
                    if src[pos : pos + 1] not in ("'", '"'):
                        raise self.error("Expected module specifier after 'from'", pos)
                    return pos
                last = word
            else:
                raise self.error(f"Unexpected {ch!r} in import declaration", pos)
            seen_binding = True

    # ---- JSX ----

    def jsx_starts(self, pos: int) -> bool:
        following = self.source[pos + 1 : pos + 2]
        return following == ">" or following.isalpha() or following in ("_", "$")

    def scan_element(self, start: int) -> JSXElement:
        src = self.source
        pos = self.skip_trivia(start + 1)
        if src.startswith(">", pos):
            fragment = JSXElement(name="", span=Span(start, pos + 1), name_end=pos)
            self.elements.append(fragment)
            fragment.span = Span(start, self.scan_children(pos + 1, fragment))
            return fragment

        match = _JSX_NAME_RE.match(src, pos)
        if match is None:
            raise self.error("Expected JSX element name", pos)
        element = JSXElement(name=match.group(), span=Span(start, match.end()), name_end=match.end())
        # Registered before its children so elements stay in document order.
        self.elements.append(element)

        attributes: list[JSXAttribute] = []
        pos = match.end()
        while True:
            pos = self.skip_trivia(pos)
            if pos >= self.length:
                raise self.error(f"Unterminated JSX element <{element.name}>", start)
            if src.startswith("/>", pos):
                element.self_closing = True
                end = pos + 2
                break
            if src[pos] == ">":
                end = self.scan_children(pos + 1, element)
                break
            attribute, pos = self.scan_attribute(pos)
            attributes.append(attribute)
            element.attributes_end = pos

        element.attributes = list(attributes)
        element.original_attributes = tuple(attributes)
        element.span = Span(start, end)
        return element

    def scan_attribute(self, pos: int) -> tuple[JSXAttribute, int]:
        """Scan one attribute; returns it with the offset just past it."""
        src = self.source
        if src[pos] == "{":
            # Spread attribute: {...props}
            close = self.scan_code(pos + 1, closer="}")
            return JSXAttribute(name=None, span=Span(pos, close + 1)), close + 1
        match = _JSX_ATTR_RE.match(src, pos)
        if match is None:
            raise self.error(f"Unexpected {src[pos]!r} in JSX element", pos)
        name = match.group()
        end = match.end()
        value = None
        equals = self.skip_trivia(end)
        if src.startswith("=", equals):
            value = self.scan_attribute_value(self.skip_trivia(equals + 1))
            end = value.span.end
        return JSXAttribute(name=name, span=Span(pos, end), source_name=name, value=value), end

    def scan_attribute_value(self, pos: int) -> AttributeValue:
        src = self.source
        quote = src[pos : pos + 1]
        if quote in ("'", '"'):
            # JSX attribute strings have no escapes.
            close = src.find(quote, pos + 1)
            if close == -1:
                raise self.error("Unterminated JSX attribute string", pos)
            return AttributeValue("string", Span(pos, close + 1))
        if quote == "{":
            close = self.scan_code(pos + 1, closer="}")
            return AttributeValue("expression", Span(pos, close + 1), expression=Span(pos + 1, close))
        if quote == "<":
            return AttributeValue("element", self.scan_element(pos).span)
        raise self.error("Expected JSX attribute value", pos)

    def scan_children(self, pos: int, element: JSXElement) -> int:
        """Scan an element's children; returns the offset after its closing tag."""
        src = self.source
        while True:
            if pos >= self.length:
                raise self.error(f"Unterminated JSX element <{element.name}>", element.span.start)
            ch = src[pos]
            if ch == "{":
                pos = self.scan_code(pos + 1, closer="}") + 1
            elif ch == "<":
                after = self.skip_trivia(pos + 1)
                if src.startswith("/", after):
                    close = src.find(">", after)
                    if close == -1:
                        raise self.error(f"Unterminated closing tag for <{element.name}>", pos)
                    name = src[after + 1 : close].strip()
                    if name != element.name:
                        raise self.error(
                            f"Expected closing tag for <{element.name}>, found </{name}>", pos
                        )
                    return close + 1
                pos = self.scan_element(pos).span.end
            else:
                pos = _JSX_TEXT_RE.match(src, pos).end()  # type: ignore[union-attr]


def parse_module(source: str) -> Module:
    """Parse JavaScript module source into a :class:`Module`."""
    return _Scanner(source).scan()
