"""Serialization exceptions."""

from selectorkit.domain.exceptions.base import SelectorKitError


class SerializationError(SelectorKitError):
    """Object could not be converted to or from JSON.

    Attributes:
        reason: Why conversion failed (must not be empty)
    """

    def __init__(self, reason: str) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")

        self.reason = reason
        super().__init__(f"Serialization failed: {reason}")
