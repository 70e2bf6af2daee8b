"""Tests for attribute resolution on single elements."""

from jsx_stylesheet.config import TransformConfig
from jsx_stylesheet.model.stylesheet import HelperInjectionFlags
from jsx_stylesheet.parser import parse_module
from jsx_stylesheet.transforms.classify import classify_element
from jsx_stylesheet.transforms.resolve import resolve_element, style_code


def _resolve(
    jsx: str, config: TransformConfig | None = None
) -> tuple[str, HelperInjectionFlags]:
    module = parse_module(jsx)
    flags = HelperInjectionFlags()
    element = module.elements[0]
    classification = classify_element(element, module.source)
    assert classification is not None
    resolve_element(element, classification, flags, config or TransformConfig())
    return module.to_source(), flags


# ---------------------------------------------------------------------------
# Static class names
# ---------------------------------------------------------------------------


class TestStaticClassNames:
    def test_single_class(self):
        out, flags = _resolve('<div className="header" />')
        assert out == '<div style={_styleSheet["header"]} />'
        assert not flags.needs_get_style_helper

    def test_multiple_classes(self):
        out, _ = _resolve('<div className="header1 header2" />')
        assert out == (
            '<div style={Object.assign({}, _styleSheet["header1"], _styleSheet["header2"])} />'
        )

    def test_keeps_other_attributes_in_order(self):
        out, _ = _resolve('<div id="main" className="header" data-x={1}>text</div>')
        assert out == '<div id="main" data-x={1} style={_styleSheet["header"]}>text</div>'

    def test_non_ascii_class_name(self):
        out, _ = _resolve('<p className="título" />')
        assert out == '<p style={_styleSheet["título"]} />'

    def test_class_name_with_quote(self):
        out, _ = _resolve("<p className='say\"hi' />")
        assert out == '<p style={_styleSheet["say\\"hi"]} />'


# ---------------------------------------------------------------------------
# Existing style attribute
# ---------------------------------------------------------------------------


class TestExistingStyle:
    def test_object_style_merged_last(self):
        out, _ = _resolve('<div className="header" style={{ color: "red" }} />')
        assert out == (
            '<div style={Object.assign({}, _styleSheet["header"], { color: "red" })} />'
        )

    def test_style_replaced_in_place(self):
        out, _ = _resolve('<div style={base} id="x" className="a b" />')
        assert out == (
            '<div style={Object.assign({}, _styleSheet["a"], _styleSheet["b"], base)} id="x" />'
        )

    def test_multiline_style_kept_verbatim(self):
        out, _ = _resolve('<div className="a" style={{\n  height: 100,\n}} />')
        assert out == '<div style={Object.assign({}, _styleSheet["a"], {\n  height: 100,\n})} />'

    def test_array_style(self):
        out, flags = _resolve(
            '<div className="header2" style={[styles.header1, styles.header3]} />'
        )
        assert out == (
            '<div style={[_styleSheet["header2"], styles.header1, styles.header3]} />'
        )
        assert not flags.needs_get_style_helper

    def test_empty_array_style(self):
        out, _ = _resolve('<div className="a b" style={[]} />')
        assert out == '<div style={[_styleSheet["a"], _styleSheet["b"]]} />'


# ---------------------------------------------------------------------------
# Dynamic class names
# ---------------------------------------------------------------------------


class TestDynamicClassNames:
    def test_expression(self):
        out, flags = _resolve("<div className={props.visible ? 'show' : 'hide'} />")
        assert out == "<div style={_getStyle(props.visible ? 'show' : 'hide')} />"
        assert flags.needs_get_style_helper

    def test_expression_with_style(self):
        out, _ = _resolve("<div className={cls} style={{ margin: 0 }} />")
        assert out == "<div style={Object.assign({}, _getStyle(cls), { margin: 0 })} />"

    def test_expression_with_array_style(self):
        out, _ = _resolve("<div className={cls} style={[a, b]} />")
        assert out == "<div style={[_getStyle(cls), a, b]} />"

    def test_valueless_class_name(self):
        out, flags = _resolve("<div className />")
        assert out == "<div style={_getStyle(true)} />"
        assert flags.needs_get_style_helper

    def test_nested_element_in_expression_is_preserved(self):
        out, _ = _resolve("<A className={pick(<b />)} />")
        assert out == "<A style={_getStyle(pick(<b />))} />"


# ---------------------------------------------------------------------------
# Options and edge cases
# ---------------------------------------------------------------------------


class TestOptions:
    def test_retain_class_name(self):
        out, _ = _resolve('<div className="a" />', TransformConfig(retain_class_name=True))
        assert out == '<div className="a" style={_styleSheet["a"]} />'

    def test_development_mode_renames_class_attribute(self):
        config = TransformConfig(environment_mode="development")
        out, _ = _resolve('<div className="a" style={s} />', config)
        assert out == '<div __class="a" style={Object.assign({}, _styleSheet["a"], s)} />'

    def test_development_mode_keeps_dynamic_value(self):
        config = TransformConfig(environment_mode="development")
        out, _ = _resolve("<div className={cls} />", config)
        assert out == "<div __class={cls} style={_getStyle(cls)} />"

    def test_empty_class_name_is_removed(self):
        out, _ = _resolve('<div id="x" className="" />')
        assert out == '<div id="x" />'

    def test_blank_class_name_is_removed_even_when_retained(self):
        config = TransformConfig(retain_class_name=True, environment_mode="development")
        out, _ = _resolve('<div className="  " style={s} />', config)
        assert out == "<div style={s} />"

    def test_duplicate_class_names_are_all_dropped(self):
        out, _ = _resolve('<div className="a" id="x" className="b" />')
        assert out == '<div id="x" style={_styleSheet["b"]} />'

    def test_duplicate_class_names_retained(self):
        config = TransformConfig(retain_class_name=True)
        out, _ = _resolve('<div className="a" className="b" />', config)
        assert out == '<div className="a" className="b" style={_styleSheet["b"]} />'

    def test_duplicate_class_names_renamed_in_development(self):
        config = TransformConfig(environment_mode="development")
        out, _ = _resolve('<div className="a" className={b} />', config)
        assert out == '<div __class="a" __class={b} style={_getStyle(b)} />'

    def test_style_only_element_untouched(self):
        source = '<div style={{ color: "red" }} />'
        out, flags = _resolve(source)
        assert out == source
        assert flags == HelperInjectionFlags()


class TestStyleCode:
    def test_empty_class_has_no_code(self):
        module = parse_module('<div className="" />')
        classification = classify_element(module.elements[0], module.source)
        assert classification is not None
        assert style_code(classification, HelperInjectionFlags()) is None

    def test_static_code_is_literal_text(self):
        module = parse_module('<div className="a" />')
        classification = classify_element(module.elements[0], module.source)
        assert classification is not None
        assert style_code(classification, HelperInjectionFlags()) == ['_styleSheet["a"]']
