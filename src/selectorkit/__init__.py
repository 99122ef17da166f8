"""selectorkit - immutable CSS selector builder with ordering validation."""

__version__ = "0.1.0"

from selectorkit.application.serialization import from_json, get_json
from selectorkit.domain.exceptions import (
    InvalidCombinatorError,
    OrderError,
    RepeatError,
    SelectorKitError,
    SerializationError,
)
from selectorkit.domain.model import (
    BuilderConfig,
    Combinator,
    Rectangle,
    SelectorBuilder,
    SelectorPartKind,
    combine,
)
from selectorkit.presentation.api import CssSelectorBuilder, css_selector_builder

__all__ = [
    "__version__",
    # Builder
    "BuilderConfig",
    "Combinator",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "SelectorPartKind",
    "combine",
    "css_selector_builder",
    # Errors
    "SelectorKitError",
    "OrderError",
    "RepeatError",
    "InvalidCombinatorError",
    "SerializationError",
    # Helpers
    "Rectangle",
    "from_json",
    "get_json",
]
