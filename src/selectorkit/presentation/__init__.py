"""Presentation layer: public facade and pytest plugin."""

from selectorkit.presentation.api import CssSelectorBuilder, css_selector_builder

__all__ = ["CssSelectorBuilder", "css_selector_builder"]
