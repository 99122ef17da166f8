"""Combinator enum."""

from __future__ import annotations

import logging
from enum import Enum

from selectorkit.domain.exceptions.combinator import InvalidCombinatorError

logger = logging.getLogger(__name__)


class Combinator(Enum):
    """Token joining two selectors into a complex selector."""

    DESCENDANT = " "  # div p
    ADJACENT_SIBLING = "+"  # h1 + p
    GENERAL_SIBLING = "~"  # h1 ~ p
    CHILD = ">"  # ul > li

    @classmethod
    def parse(cls, token: str | Combinator) -> Combinator:
        """Resolve token to a Combinator.

        Args:
            token: Combinator member or its literal token

        Returns:
            Matching Combinator

        Raises:
            InvalidCombinatorError: If token is not a known combinator
        """
        if isinstance(token, Combinator):
            return token
        try:
            return cls(token)
        except ValueError:
            logger.debug("Rejected combinator %r", token)
            raise InvalidCombinatorError(str(token)) from None
