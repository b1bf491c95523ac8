"""Health component.

Immutable hit point magnitude owned by a :class:`combat_core.character.Character`.
Every arithmetic operation returns a new ``Health``; the owning character
reassigns its field rather than mutating the value.
"""

from dataclasses import dataclass

from combat_core.types import HitPoints


def _check_points(value: object, name: str) -> HitPoints:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative: {value}")
    return value


@dataclass(frozen=True)
class Health:
    """Remaining vitality of a character.

    Attributes:
        points:
            Current hit points. Never negative; damage saturates at zero while
            healing has no upper bound.
    """

    points: HitPoints

    def __post_init__(self) -> None:
        _check_points(self.points, "points")

    @classmethod
    def at(cls, value: HitPoints) -> "Health":
        """Return a ``Health`` holding exactly ``value`` points."""
        return cls(points=value)

    @classmethod
    def empty(cls) -> "Health":
        """Return zero health. Same as ``Health.at(0)``."""
        return cls(points=0)

    def is_empty(self) -> bool:
        return self.points == 0

    def subtract(self, amount: HitPoints) -> "Health":
        """Return health reduced by ``amount``, floored at zero."""
        amount = _check_points(amount, "amount")
        return Health(points=max(0, self.points - amount))

    def add(self, amount: HitPoints) -> "Health":
        """Return health increased by ``amount`` (unclamped above)."""
        amount = _check_points(amount, "amount")
        return Health(points=self.points + amount)

    def __sub__(self, amount: HitPoints) -> "Health":
        return self.subtract(amount)

    def __add__(self, amount: HitPoints) -> "Health":
        return self.add(amount)
