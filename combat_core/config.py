"""Spawn configuration.

``Character.spawn`` builds every character from :data:`DEFAULT_SPAWN`.
"""

from dataclasses import dataclass

from combat_core.types import HitPoints


@dataclass(frozen=True)
class SpawnConfig:
    """Initial attributes of a freshly spawned character.

    Attributes:
        health: Starting hit points.
        level: Starting (and permanent) level.
    """

    health: HitPoints = 1000
    level: int = 1


DEFAULT_SPAWN = SpawnConfig()
