"""Domain exceptions."""

from selectorkit.domain.exceptions.base import SelectorKitError
from selectorkit.domain.exceptions.combinator import InvalidCombinatorError
from selectorkit.domain.exceptions.ordering import OrderError, RepeatError, SelectorOrderingError
from selectorkit.domain.exceptions.serialization import SerializationError

__all__ = [
    "SelectorKitError",
    "SelectorOrderingError",
    "OrderError",
    "RepeatError",
    "InvalidCombinatorError",
    "SerializationError",
]
