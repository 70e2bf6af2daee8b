"""Names and code fragments the pass injects into transformed modules.

Each fragment is inserted at most once per module, always in this order:
``MERGE_STYLES_FUNCTION``, ``GET_STYLE_FUNCTION``, then the stylesheet
declaration built by :func:`style_sheet_declaration`.
"""

from __future__ import annotations

# Attribute names.
CLASS_NAME_ATTRIBUTE = "className"
STYLE_ATTRIBUTE = "style"
DEBUG_CLASS_ATTRIBUTE = "__class"

# Identifiers introduced into the module.
STYLE_SHEET_NAME = "_styleSheet"
MERGE_STYLES_NAME = "_mergeStyles"
GET_STYLE_NAME = "_getStyle"
BINDING_SUFFIX = "StyleSheet"

MERGE_STYLES_FUNCTION = """\
function _mergeStyles() {
  var merged = {};

  for (var index = 0; index < arguments.length; index++) {
    var sheet = arguments[index];

    for (var key in sheet) {
      if (Object.prototype.hasOwnProperty.call(sheet, key)) {
        merged[key] = sheet[key];
      }
    }
  }

  return merged;
}"""

GET_STYLE_FUNCTION = """\
function _getStyle(value) {
  if (typeof value === "string") {
    return value.split(/\\s+/).reduce(function (style, name) {
      return name ? Object.assign(style, _styleSheet[name]) : style;
    }, {});
  }

  if (Array.isArray(value)) {
    return value.reduce(function (style, item) {
      return Object.assign(style, _getStyle(item));
    }, {});
  }

  if (value !== null && typeof value === "object" && Object.getPrototypeOf(value) === Object.prototype) {
    return Object.keys(value).reduce(function (style, name) {
      return value[name] ? Object.assign(style, _getStyle(name)) : style;
    }, {});
  }

  return value;
}"""


def style_sheet_declaration(accessor_expression: str) -> str:
    """The single ``_styleSheet`` binding statement."""
    return f"var {STYLE_SHEET_NAME} = {accessor_expression};"
