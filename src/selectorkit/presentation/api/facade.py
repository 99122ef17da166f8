"""Fluent facade for building CSS selectors.

Entry point for selector construction. Every call starts from a fresh
immutable SelectorBuilder; the facade itself holds only its config.

Example:
    css = css_selector_builder
    css.combine(
        css.element("div").id("main"),
        "+",
        css.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from selectorkit.domain.model.configuration import BuilderConfig
from selectorkit.domain.model.selector import SelectorBuilder, combine

if TYPE_CHECKING:
    from selectorkit.domain.model.combinator import Combinator


class CssSelectorBuilder:
    """Entry point for selector construction.

    Attributes:
        _config: Builder configuration
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        """Initialize facade.

        Args:
            config: Builder configuration. Uses defaults if None.
        """
        self._config = config or BuilderConfig()

    @property
    def config(self) -> BuilderConfig:
        """Access builder configuration."""
        return self._config

    def empty(self) -> SelectorBuilder:
        """Start an empty selector."""
        return SelectorBuilder()

    def element(self, value: str) -> SelectorBuilder:
        """Start selector with type selector: div."""
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        """Start selector with id selector: #main."""
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        """Start selector with class selector: .container."""
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        """Start selector with attribute selector: [href]."""
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Start selector with pseudo-class selector: :hover."""
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Start selector with pseudo-element selector: ::before."""
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        left: SelectorBuilder,
        combinator: str | Combinator,
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two selectors with a combinator.

        Args:
            left: Left selector
            combinator: One of ' ', '+', '~', '>'
            right: Right selector

        Returns:
            New SelectorBuilder: "<left> <combinator> <right>"

        Raises:
            InvalidCombinatorError: If config is strict and token is unknown
        """
        return combine(left, combinator, right, strict=self._config.strict_combinators)

    def stringify(self, builder: SelectorBuilder) -> str:
        """Render selector. Same as builder.stringify()."""
        if not isinstance(builder, SelectorBuilder):
            raise TypeError(f"builder must be SelectorBuilder, got {type(builder).__name__}")
        return builder.stringify()


css_selector_builder = CssSelectorBuilder()
