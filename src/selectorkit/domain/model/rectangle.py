"""Rectangle value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle.

    Attributes:
        width: Width (real number, must be >= 0)
        height: Height (real number, must be >= 0)
    """

    width: float
    height: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")

    def get_area(self) -> float:
        """Return width * height."""
        return self.width * self.height
