"""Public API: selector builder facade."""

from selectorkit.presentation.api.facade import CssSelectorBuilder, css_selector_builder

__all__ = ["CssSelectorBuilder", "css_selector_builder"]
