from jsx_stylesheet.parser.errors import ParseError
from jsx_stylesheet.parser.scanner import parse_module
from jsx_stylesheet.parser.transformer import ValueShape, parse_import, parse_value_shape

__all__ = ["ParseError", "ValueShape", "parse_import", "parse_module", "parse_value_shape"]
