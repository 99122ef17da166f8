"""Selector builder configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Builder configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        strict_combinators: Reject combinator tokens other than
            ' ', '+', '~', '>'. False accepts any non-empty token verbatim.
    """

    strict_combinators: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.strict_combinators, bool):
            raise TypeError(
                f"strict_combinators must be bool, got {type(self.strict_combinators).__name__}"
            )
