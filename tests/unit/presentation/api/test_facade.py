"""Tests for presentation/api/facade.py."""

import pytest

from selectorkit.domain.exceptions.combinator import InvalidCombinatorError
from selectorkit.domain.exceptions.ordering import OrderError, RepeatError
from selectorkit.domain.model.configuration import BuilderConfig
from selectorkit.domain.model.selector import SelectorBuilder
from selectorkit.presentation.api.facade import CssSelectorBuilder, css_selector_builder
from tests.factories import DOCS_EXAMPLE_TEXT


class TestCssSelectorBuilderInit:
    """Tests for CssSelectorBuilder initialization."""

    def test_default_config(self) -> None:
        assert CssSelectorBuilder().config == BuilderConfig()

    def test_custom_config(self) -> None:
        config = BuilderConfig(strict_combinators=False)
        assert CssSelectorBuilder(config).config is config

    def test_module_instance(self) -> None:
        assert isinstance(css_selector_builder, CssSelectorBuilder)
        assert css_selector_builder.config.strict_combinators is True


class TestCssSelectorBuilderEntryPoints:
    """Tests for facade entry points."""

    @pytest.fixture
    def css(self) -> CssSelectorBuilder:
        return CssSelectorBuilder()

    def test_entry_points(self, css: CssSelectorBuilder) -> None:
        assert css.element("div").stringify() == "div"
        assert css.id("main").stringify() == "#main"
        assert css.class_("container").stringify() == ".container"
        assert css.attr("href").stringify() == "[href]"
        assert css.pseudo_class("hover").stringify() == ":hover"
        assert css.pseudo_element("before").stringify() == "::before"

    def test_empty(self, css: CssSelectorBuilder) -> None:
        assert css.empty() == SelectorBuilder()

    def test_calls_do_not_share_state(self, css: CssSelectorBuilder) -> None:
        first = css.element("div")
        second = css.element("span")
        assert first.stringify() == "div"
        assert second.stringify() == "span"

    def test_stringify_does_not_reset_facade(self, css: CssSelectorBuilder) -> None:
        builder = css.id("main").class_("container").class_("editable")
        assert css.stringify(builder) == "#main.container.editable"
        assert css.stringify(builder) == "#main.container.editable"
        assert css.class_("x").stringify() == ".x"

    def test_stringify_non_builder_raises(self, css: CssSelectorBuilder) -> None:
        with pytest.raises(TypeError, match="builder must be SelectorBuilder"):
            css.stringify("div")  # type: ignore[arg-type]

    def test_ordering_errors_propagate(self, css: CssSelectorBuilder) -> None:
        with pytest.raises(OrderError):
            css.class_("a").id("b")
        with pytest.raises(RepeatError):
            css.pseudo_element("before").pseudo_element("after")


class TestCssSelectorBuilderCombine:
    """Tests for facade combine()."""

    def test_nested_example(self) -> None:
        css = css_selector_builder
        result = css.combine(
            css.element("div").id("main").class_("container").class_("draggable"),
            "+",
            css.combine(
                css.element("table").id("data"),
                "~",
                css.combine(
                    css.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    css.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert result.stringify() == DOCS_EXAMPLE_TEXT

    def test_combine_with_attribute_selectors(self) -> None:
        css = css_selector_builder
        result = css.combine(
            css.element("p").pseudo_element("first-line"),
            ">",
            css.element("a").attr('href$=".png"').pseudo_class("focus"),
        )
        assert result.stringify() == 'p::first-line > a[href$=".png"]:focus'

    def test_strict_rejects_invalid(self) -> None:
        css = CssSelectorBuilder()
        with pytest.raises(InvalidCombinatorError):
            css.combine(css.element("a"), ">>", css.element("b"))

    def test_lenient_accepts_invalid(self) -> None:
        css = CssSelectorBuilder(BuilderConfig(strict_combinators=False))
        assert css.combine(css.element("a"), ">>", css.element("b")).stringify() == "a >> b"
