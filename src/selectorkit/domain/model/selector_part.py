"""Selector part value object."""

from dataclasses import dataclass

from selectorkit.domain.model.part_kind import SelectorPartKind


@dataclass(frozen=True, slots=True)
class SelectorPart:
    """Single part of a compound selector.

    Attributes:
        kind: Part kind (element, id, class, ...)
        value: Raw value, rendered without any content validation
    """

    kind: SelectorPartKind
    value: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.kind, SelectorPartKind):
            raise TypeError(f"kind must be SelectorPartKind, got {type(self.kind).__name__}")
        if not isinstance(self.value, str):
            raise TypeError(f"value must be str, got {type(self.value).__name__}")

    @property
    def fragment(self) -> str:
        """Rendered fragment: #main, .container, [href], ..."""
        return self.kind.render(self.value)

    def __str__(self) -> str:
        return self.fragment
