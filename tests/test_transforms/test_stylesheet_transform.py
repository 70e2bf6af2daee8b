"""Tests for the module-level stylesheet transform."""

import logging

from jsx_stylesheet import transform_source
from jsx_stylesheet.catalog import GET_STYLE_FUNCTION, MERGE_STYLES_FUNCTION
from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.module import Module
from jsx_stylesheet.model.stylesheet import HelperInjectionFlags, StylesheetAccessor
from jsx_stylesheet.parser import parse_module
from jsx_stylesheet.transforms import StylesheetTransform, apply_transforms
from jsx_stylesheet.transforms.stylesheet import build_prelude


# ---------------------------------------------------------------------------
# Prelude
# ---------------------------------------------------------------------------


class TestBuildPrelude:
    def test_declaration_only(self):
        prelude = build_prelude(StylesheetAccessor(("appStyleSheet",)), HelperInjectionFlags())
        assert prelude == ["var _styleSheet = appStyleSheet;"]

    def test_helpers_come_first_in_fixed_order(self):
        flags = HelperInjectionFlags()
        flags.require_get_style()
        flags.require_merge()
        prelude = build_prelude(StylesheetAccessor(("a", "b")), flags)
        assert prelude == [
            MERGE_STYLES_FUNCTION,
            GET_STYLE_FUNCTION,
            "var _styleSheet = _mergeStyles(a, b);",
        ]


# ---------------------------------------------------------------------------
# StylesheetTransform
# ---------------------------------------------------------------------------


class TestStylesheetTransform:
    def test_single_stylesheet(self):
        source = (
            "import React from 'react';\n"
            "import './app.css';\n"
            "\n"
            'const App = () => <div className="header">Hi</div>;\n'
        )
        assert transform_source(source) == (
            "import React from 'react';\n"
            "import appStyleSheet from './app.css';\n"
            "\n"
            "var _styleSheet = appStyleSheet;\n"
            "\n"
            'const App = () => <div style={_styleSheet["header"]}>Hi</div>;\n'
        )

    def test_without_stylesheet_import_module_is_unchanged(self):
        source = "import React from 'react';\nconst a = <div className=\"header\" />;\n"
        assert transform_source(source) == source

    def test_author_bound_stylesheet_only_is_unchanged(self):
        source = "import styles from './style.css';\nconst a = <div className=\"header\" />;\n"
        assert transform_source(source) == source

    def test_declaration_inserted_without_class_names(self):
        out = transform_source("import './app.css';\nconst a = <div />;\n")
        assert out == (
            "import appStyleSheet from './app.css';\n"
            "\n"
            "var _styleSheet = appStyleSheet;\n"
            "const a = <div />;\n"
        )

    def test_two_stylesheets_are_merged(self):
        out = transform_source(
            "import './app1.css';\nimport './app2.css';\n\nconst a = <b className=\"x\" />;\n"
        )
        assert out.count("function _mergeStyles()") == 1
        assert "var _styleSheet = _mergeStyles(app1StyleSheet, app2StyleSheet);" in out
        assert out.index("function _mergeStyles()") < out.index("var _styleSheet")
        assert "function _getStyle(" not in out

    def test_get_style_helper_injected_once(self):
        out = transform_source(
            "import './app.css';\n"
            "const a = <div className={x}><span className={y} /></div>;\n"
        )
        assert out.count("function _getStyle(value)") == 1
        assert out.index("function _getStyle(value)") < out.index("var _styleSheet")
        assert "<div style={_getStyle(x)}><span style={_getStyle(y)} /></div>" in out

    def test_helper_order_with_merge_and_get_style(self):
        out = transform_source(
            "import './a.css';\nimport './b.css';\nconst el = <i className={c} />;\n"
        )
        merge = out.index("function _mergeStyles()")
        get_style = out.index("function _getStyle(value)")
        declaration = out.index("var _styleSheet =")
        assert merge < get_style < declaration

    def test_prelude_follows_trailing_comment(self):
        out = transform_source("import './app.css'; // styles\nconst a = 1;\n")
        assert out == (
            "import appStyleSheet from './app.css'; // styles\n"
            "\n"
            "var _styleSheet = appStyleSheet;\n"
            "const a = 1;\n"
        )

    def test_import_on_last_line(self):
        out = transform_source("import './app.css'")
        assert out == "import appStyleSheet from './app.css'\n\nvar _styleSheet = appStyleSheet;"

    def test_nested_elements_in_attributes(self):
        out = transform_source(
            "import './app.css';\n"
            'const a = <A icon={<i className="icon" />} className="card" />;\n'
        )
        assert (
            '<A icon={<i style={_styleSheet["icon"]} />} style={_styleSheet["card"]} />' in out
        )

    def test_element_after_postfix_division(self):
        out = transform_source(
            "import './app.css';\nlet y = i++ / 2; const e = <i className=\"z\"/>;\n"
        )
        assert 'const e = <i style={_styleSheet["z"]}/>;' in out

    def test_element_as_loop_body(self):
        out = transform_source("import './app.css';\nwhile (x) <i className=\"z\"/>;\n")
        assert 'while (x) <i style={_styleSheet["z"]}/>;' in out

    def test_second_pass_is_a_no_op(self):
        once = transform_source("import './app.css';\nconst a = <div className=\"a\" />;\n")
        assert transform_source(once) == once

    def test_development_mode(self):
        config = TransformConfig(environment_mode="development")
        out = transform_source("import './app.css';\nconst a = <p className=\"a\" />;\n", config)
        assert '<p __class="a" style={_styleSheet["a"]} />' in out

    def test_node_env_development(self, monkeypatch):
        monkeypatch.setenv("NODE_ENV", "development")
        out = transform_source("import './app.css';\nconst a = <p className=\"a\" />;\n")
        assert "__class" in out

    def test_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="jsx_stylesheet"):
            transform_source("import './app.css';\nconst a = <p className=\"a\" />;\n")
        assert "bound as appStyleSheet" in caplog.text
        assert "rewrote 1 element(s)" in caplog.text

    def test_logging_unchanged_module(self, caplog):
        with caplog.at_level(logging.INFO, logger="jsx_stylesheet"):
            transform_source("const a = 1;\n")
        assert "left unchanged" in caplog.text


class TestApplyTransforms:
    def test_custom_transforms_run_after_builtin(self):
        seen: list[str] = []

        class Recorder:
            def apply(self, module: Module) -> Module:
                seen.append(module.to_source())
                return module

        module = parse_module("import './app.css';\nconst a = <p className=\"a\" />;\n")
        apply_transforms(module, custom_transforms=[Recorder()])
        assert len(seen) == 1
        assert "var _styleSheet = appStyleSheet;" in seen[0]

    def test_transform_uses_given_config(self):
        transform = StylesheetTransform(TransformConfig(retain_class_name=True))
        module = transform.apply(parse_module("import './app.css';\n<p className=\"a\" />;\n"))
        assert '<p className="a" style={_styleSheet["a"]} />' in module.to_source()
