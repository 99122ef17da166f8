"""Selector part ordering exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from selectorkit.domain.exceptions.base import SelectorKitError

if TYPE_CHECKING:
    from selectorkit.domain.model.part_kind import SelectorPartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
REPEAT_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)


class SelectorOrderingError(SelectorKitError):
    """Part rejected by the canonical ordering rules.

    Attributes:
        kind: Kind of the rejected part
        previous: Kind of the last accepted part
    """

    def __init__(self, kind: SelectorPartKind, previous: SelectorPartKind, message: str) -> None:
        # FAIL-FIRST: validate required parameters
        if kind is None:
            raise TypeError("kind must not be None")
        if previous is None:
            raise TypeError("previous must not be None")

        self.kind = kind
        self.previous = previous
        super().__init__(message)


class OrderError(SelectorOrderingError):
    """Part appended after a part that must follow it."""

    def __init__(self, kind: SelectorPartKind, previous: SelectorPartKind) -> None:
        if kind is not None and previous is not None and previous.rank <= kind.rank:
            raise ValueError(f"{kind.label} after {previous.label} is not an ordering violation")
        super().__init__(kind, previous, ORDER_MESSAGE)


class RepeatError(SelectorOrderingError):
    """Element, id or pseudo-element appended a second time."""

    def __init__(self, kind: SelectorPartKind) -> None:
        if kind is not None and kind.repeatable:
            raise ValueError(f"{kind.label} may be repeated")
        super().__init__(kind, kind, REPEAT_MESSAGE)
