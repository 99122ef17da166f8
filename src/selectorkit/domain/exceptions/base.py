"""Base exceptions for selectorkit domain."""


class SelectorKitError(Exception):
    """Root exception for all selectorkit errors.

    All domain exceptions inherit from this.
    Allows catching all selectorkit-specific errors.
    """
