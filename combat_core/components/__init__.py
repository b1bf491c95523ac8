"""combat_core.components
=======================

Value components owned by a :class:`combat_core.character.Character`.

Both classes are frozen ``@dataclass`` value objects compared structurally, so
tests and callers can write::

    from combat_core.components import Health, Level

    assert character.health == Health.at(1000)
    assert character.level == Level.of(1)

State changes are expressed by replacing a component with a new instance,
never by mutating one in place.
"""

from .health import Health
from .level import Level

__all__ = [
    "Health",
    "Level",
]
