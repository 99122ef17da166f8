"""Row extraction shared by selector reporters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from selectorkit.domain.model.selector_part import SelectorPart

if TYPE_CHECKING:
    from selectorkit.domain.model.selector import SelectorBuilder

COMBINATOR_KIND = "combinator"


@dataclass(frozen=True, slots=True)
class PartRow:
    """One reported step of a selector.

    Attributes:
        index: 1-based position in parts
        kind: Part kind label or "combinator"
        value: Raw value (combinator token for combinators)
        fragment: Text contributed to the selector
    """

    index: int
    kind: str
    value: str
    fragment: str


def part_rows(builder: SelectorBuilder) -> tuple[PartRow, ...]:
    """Flatten builder parts into report rows."""
    rows: list[PartRow] = []
    for index, part in enumerate(builder.parts, start=1):
        match part:
            case SelectorPart():
                rows.append(PartRow(index, part.kind.label, part.value, part.fragment))
            case str():
                rows.append(PartRow(index, COMBINATOR_KIND, part, f" {part} "))
    return tuple(rows)
