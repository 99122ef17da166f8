"""selectorkit domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, logging
"""

from selectorkit.domain.exceptions import (
    InvalidCombinatorError,
    OrderError,
    RepeatError,
    SelectorKitError,
    SelectorOrderingError,
    SerializationError,
)
from selectorkit.domain.model import (
    BuilderConfig,
    Combinator,
    Rectangle,
    SelectorBuilder,
    SelectorPart,
    SelectorPartKind,
    combine,
)

__all__ = [
    # Exceptions
    "SelectorKitError",
    "SelectorOrderingError",
    "OrderError",
    "RepeatError",
    "InvalidCombinatorError",
    "SerializationError",
    # Model
    "BuilderConfig",
    "Combinator",
    "Rectangle",
    "SelectorBuilder",
    "SelectorPart",
    "SelectorPartKind",
    "combine",
]
