"""Combinator exceptions."""

from selectorkit.domain.exceptions.base import SelectorKitError


class InvalidCombinatorError(SelectorKitError):
    """Combinator token is not one of ' ', '+', '~', '>'.

    Attributes:
        combinator: Rejected token
    """

    def __init__(self, combinator: str) -> None:
        if combinator is None:
            raise TypeError("combinator must not be None")

        self.combinator = combinator
        super().__init__(
            f"Invalid combinator {combinator!r}: expected one of ' ', '+', '~', '>'"
        )
