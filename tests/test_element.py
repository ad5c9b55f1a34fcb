"""Tests for wren.html.element — attributes, classes, and rendering."""

import pytest

from wren.errors import InvalidArgumentError, InvalidAttributeError
from wren.html.container import Div
from wren.html.element import Element, keyword_attribute_name, validate_attribute_name
from wren.html.tags import HtmlTag


class TestAttributes:
    def test_empty_element(self) -> None:
        assert str(Element(HtmlTag.DIV).render()) == "<div></div>"

    def test_set_attribute(self) -> None:
        html = Element(HtmlTag.DIV).attr("id", "main").render()
        assert str(html) == '<div id="main"></div>'

    def test_last_write_wins(self) -> None:
        html = Element(HtmlTag.DIV).attr("title", "a").attr("title", "b").render()
        assert str(html) == '<div title="b"></div>'

    def test_overwrite_keeps_original_position(self) -> None:
        html = Element(HtmlTag.DIV).id("x").title("t").id("y").render()
        assert str(html) == '<div id="y" title="t"></div>'

    def test_none_removes(self) -> None:
        html = Element(HtmlTag.DIV).title("t").title(None).render()
        assert str(html) == "<div></div>"

    def test_boolean_attributes(self) -> None:
        el = Element(HtmlTag.INPUT).attr("disabled", True)
        assert str(el.render()) == '<input disabled="disabled" />'
        el.attr("disabled", False)
        assert str(el.render()) == "<input />"

    def test_values_are_escaped(self) -> None:
        html = Element(HtmlTag.DIV).title('"quoted" <b> & \'single\'').render()
        assert str(html) == '<div title="&quot;quoted&quot; &lt;b&gt; &amp; &#x27;single&#x27;"></div>'

    def test_non_string_values(self) -> None:
        html = Element(HtmlTag.DIV).data("count", 3).render()
        assert str(html) == '<div data-count="3"></div>'

    def test_data_and_aria(self) -> None:
        html = Element(HtmlTag.DIV).data("toggle", "modal").aria("hidden", "true").render()
        assert str(html) == '<div data-toggle="modal" aria-hidden="true"></div>'

    def test_boolean_data_and_aria_values(self) -> None:
        el = Element(HtmlTag.DIV).aria("expanded", False).aria("hidden", True).data("active", True)
        assert str(el.render()) == (
            '<div aria-expanded="false" aria-hidden="true" data-active="true"></div>'
        )

    def test_none_removes_data_and_aria(self) -> None:
        el = Element(HtmlTag.DIV).aria("expanded", False).aria("expanded", None)
        assert str(el.render()) == "<div></div>"

    def test_attrs_keyword_mapping(self) -> None:
        html = Element(HtmlTag.LABEL).attrs(for_="email", data_role="hint").render()
        assert str(html) == '<label for="email" data-role="hint"></label>'

    def test_get_and_has_attr(self) -> None:
        el = Element(HtmlTag.DIV).id("main")
        assert el.get_attr("id") == "main"
        assert el.has_attr("id") is True
        assert el.get_attr("title") is None
        assert el.remove_attr("id").has_attr("id") is False


class TestAttributeNames:
    @pytest.mark.parametrize("name", ["", "on click", 'a"b', "a'b", "a>b", "a/b", "a=b", "a\x00"])
    def test_rejects_malformed(self, name: str) -> None:
        with pytest.raises(InvalidAttributeError):
            Element(HtmlTag.DIV).attr(name, "x")

    def test_error_is_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid HTML attribute name"):
            validate_attribute_name("bad name")

    @pytest.mark.parametrize("name", ["id", "data-x", "aria-label", "hx-get", "@click", ":class"])
    def test_accepts_valid(self, name: str) -> None:
        assert validate_attribute_name(name) == name

    def test_keyword_attribute_name(self) -> None:
        assert keyword_attribute_name("class_") == "class"
        assert keyword_attribute_name("hx_swap_oob") == "hx-swap-oob"


class TestClasses:
    def test_add_class(self) -> None:
        assert str(Div().add_class("a").render()) == '<div class="a"></div>'

    def test_deduplicates_and_preserves_order(self) -> None:
        el = Div().add_class("b", "a").add_class("b").add_class("c a")
        assert el.classes == ("b", "a", "c")
        assert str(el.render()) == '<div class="b a c"></div>'

    def test_class_renders_at_first_write_position(self) -> None:
        html = Div().id("x").add_class("a").title("t").add_class("b").render()
        assert str(html) == '<div id="x" class="a b" title="t"></div>'

    def test_remove_class(self) -> None:
        el = Div().add_class("a b").remove_class("a")
        assert el.has_class("a") is False
        assert el.has_class("b") is True
        el.remove_class("b")
        assert str(el.render()) == "<div></div>"

    def test_class_attribute_replaces_list(self) -> None:
        el = Div().add_class("a").attr("class", "x y")
        assert el.classes == ("x", "y")
        assert el.get_attr("class") == "x y"

    def test_empty_class_attribute_clears_list(self) -> None:
        el = Div().add_class("a").attr("class", "")
        assert el.classes == ()
        assert str(el.render()) == "<div></div>"

    def test_class_kwarg(self) -> None:
        assert Div().attrs(class_="card").classes == ("card",)


class TestRendering:
    def test_render_is_idempotent(self) -> None:
        el = Div().id("a").add_class("b").append("text")
        assert el.render() == el.render()

    def test_str_and_html_protocol(self) -> None:
        el = Div().id("a")
        assert str(el) == str(el.render())
        assert el.__html__() == str(el.render())

    def test_render_returns_markup(self) -> None:
        assert hasattr(Div().render(), "__html__")

    def test_unknown_tag_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unsupported HTML tag"):
            Element("blink")
