"""Immutable CSS selector builder.

Each compound selector is built from parts in canonical order:

    element#id.class[attr]:pseudo-class::pseudo-element

Class, attribute and pseudo-class may occur several times.
Selectors are joined into complex selectors by combine().

Example:
    SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selectorkit.domain.exceptions.ordering import OrderError, RepeatError
from selectorkit.domain.model.combinator import Combinator
from selectorkit.domain.model.part_kind import SelectorPartKind
from selectorkit.domain.model.selector_part import SelectorPart

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SelectorBuilder:
    """Immutable selector value.

    Every append returns a new SelectorBuilder. The receiver stays valid,
    so a partially built selector can be branched and reused.

    Attributes:
        text: Rendered selector so far ("" when fresh)
        last_kind: Kind of last appended part, None if nothing appended
            since creation or the last combine
        parts: Appended parts in order; combinator tokens appear as str
        used_kinds: Kinds appended since creation or the last combine
    """

    text: str = ""
    last_kind: SelectorPartKind | None = None
    parts: tuple[SelectorPart | str, ...] = ()
    used_kinds: frozenset[SelectorPartKind] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.text, str):
            raise TypeError(f"text must be str, got {type(self.text).__name__}")
        if self.last_kind is not None and not isinstance(self.last_kind, SelectorPartKind):
            raise TypeError(
                f"last_kind must be SelectorPartKind or None, got {type(self.last_kind).__name__}"
            )
        if not isinstance(self.parts, tuple):
            raise TypeError(f"parts must be tuple, got {type(self.parts).__name__}")
        if not isinstance(self.used_kinds, frozenset):
            raise TypeError(f"used_kinds must be frozenset, got {type(self.used_kinds).__name__}")

    def append(self, kind: SelectorPartKind, value: str) -> SelectorBuilder:
        """Return new builder with part appended.

        Args:
            kind: Part kind
            value: Raw part value

        Returns:
            New SelectorBuilder ending with the part

        Raises:
            OrderError: If kind ranks below last_kind
            RepeatError: If kind is single-occurrence and already used
            TypeError: If value is not str
        """
        part = SelectorPart(kind=kind, value=value)
        previous = self.last_kind

        # Repeat check runs first: a second element after #id or .class is a
        # RepeatError even though it also breaks the order.
        if not kind.repeatable and kind in self.used_kinds:
            logger.debug("Rejected repeated %s in %r", kind.label, self.text)
            raise RepeatError(kind)
        if previous is not None and previous.rank > kind.rank:
            logger.debug("Rejected %s after %s in %r", kind.label, previous.label, self.text)
            raise OrderError(kind, previous)

        return SelectorBuilder(
            text=self.text + part.fragment,
            last_kind=kind,
            parts=(*self.parts, part),
            used_kinds=self.used_kinds | {kind},
        )

    def element(self, value: str) -> SelectorBuilder:
        """Append type selector: div."""
        return self.append(SelectorPartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        """Append id selector: #main."""
        return self.append(SelectorPartKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        """Append class selector: .container."""
        return self.append(SelectorPartKind.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        """Append attribute selector: [href$=".png"]."""
        return self.append(SelectorPartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Append pseudo-class selector: :focus."""
        return self.append(SelectorPartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Append pseudo-element selector: ::before."""
        return self.append(SelectorPartKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return rendered selector. Pure, repeated calls give the same text."""
        return self.text

    @property
    def is_empty(self) -> bool:
        """True if nothing has been appended or combined."""
        return not self.parts

    def __str__(self) -> str:
        return self.text


def combine(
    left: SelectorBuilder,
    combinator: str | Combinator,
    right: SelectorBuilder,
    *,
    strict: bool = True,
) -> SelectorBuilder:
    """Join two selectors with a combinator.

    Operands are rendered as-is, no ordering validation is applied to them.
    The result has no last_kind and no used_kinds, so appends continue
    the rightmost selector unchecked against it.

    Args:
        left: Left selector
        combinator: One of ' ', '+', '~', '>' (or Combinator member)
        right: Right selector
        strict: Reject unknown combinator tokens. False accepts
            any non-empty token verbatim.

    Returns:
        New SelectorBuilder: "<left> <combinator> <right>"

    Raises:
        InvalidCombinatorError: If strict and token is unknown
        TypeError: If an operand is not a SelectorBuilder
        ValueError: If not strict and token is empty
    """
    if not isinstance(left, SelectorBuilder):
        raise TypeError(f"left must be SelectorBuilder, got {type(left).__name__}")
    if not isinstance(right, SelectorBuilder):
        raise TypeError(f"right must be SelectorBuilder, got {type(right).__name__}")

    if strict or isinstance(combinator, Combinator):
        token = Combinator.parse(combinator).value
    else:
        if not isinstance(combinator, str):
            raise TypeError(f"combinator must be str, got {type(combinator).__name__}")
        if not combinator:
            raise ValueError("combinator must not be empty")
        token = combinator

    return SelectorBuilder(
        text=f"{left.stringify()} {token} {right.stringify()}",
        last_kind=None,
        parts=(*left.parts, token, *right.parts),
    )
