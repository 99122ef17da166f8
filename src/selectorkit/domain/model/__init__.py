"""Domain model: value objects and enums."""

from selectorkit.domain.model.combinator import Combinator
from selectorkit.domain.model.configuration import BuilderConfig
from selectorkit.domain.model.part_kind import SelectorPartKind
from selectorkit.domain.model.rectangle import Rectangle
from selectorkit.domain.model.selector import SelectorBuilder, combine
from selectorkit.domain.model.selector_part import SelectorPart

__all__ = [
    "BuilderConfig",
    "Combinator",
    "Rectangle",
    "SelectorBuilder",
    "SelectorPart",
    "SelectorPartKind",
    "combine",
]
