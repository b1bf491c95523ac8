"""Level component (static, no progression)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """Positive character level.

    Attributes:
        value: Level number, starting at 1.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"value must be an int, got {type(self.value).__name__}")
        if self.value < 1:
            raise ValueError(f"Level must be positive: {self.value}")

    @classmethod
    def of(cls, value: int) -> "Level":
        return cls(value=value)
