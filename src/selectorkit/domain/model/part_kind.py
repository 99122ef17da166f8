"""Selector part kind enum."""

from enum import Enum


class SelectorPartKind(Enum):
    """Kind of a compound selector part.

    Values are the canonical rank: parts must be appended in
    non-decreasing rank order.
    """

    ELEMENT = 1  # div
    ID = 2  # #main
    CLASS = 3  # .container
    ATTRIBUTE = 4  # [href$=".png"]
    PSEUDO_CLASS = 5  # :focus
    PSEUDO_ELEMENT = 6  # ::before

    @property
    def rank(self) -> int:
        """Position in canonical order (1-based)."""
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name: pseudo-class, pseudo-element, ..."""
        return self.name.lower().replace("_", "-")

    @property
    def repeatable(self) -> bool:
        """Whether the kind may occur several times in one compound selector."""
        return self not in _SINGLE_OCCURRENCE

    def render(self, value: str) -> str:
        """Render value as this kind's selector fragment."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_SINGLE_OCCURRENCE = frozenset(
    {SelectorPartKind.ELEMENT, SelectorPartKind.ID, SelectorPartKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[SelectorPartKind, tuple[str, str]] = {
    SelectorPartKind.ELEMENT: ("", ""),
    SelectorPartKind.ID: ("#", ""),
    SelectorPartKind.CLASS: (".", ""),
    SelectorPartKind.ATTRIBUTE: ("[", "]"),
    SelectorPartKind.PSEUDO_CLASS: (":", ""),
    SelectorPartKind.PSEUDO_ELEMENT: ("::", ""),
}
