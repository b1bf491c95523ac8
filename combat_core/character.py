"""Character entity and combat operations.

A :class:`Character` owns a :class:`~combat_core.components.Health` and a
:class:`~combat_core.components.Level`. Combat operations are invoked on one
character and mutate the *target's* health by reassigning a fresh value:

* ``attack`` always applies damage, clamped at zero, even to dead targets.
* ``heal`` requires a living target and raises
  :class:`~combat_core.errors.InvalidOperationError` otherwise, leaving the
  target untouched.
* ``die`` empties the character's own health and is idempotent.

A character is alive iff its health is non-empty. There is no transition from
dead back to alive.

Example:
    >>> attacker, target = Character.spawn(), Character.spawn()
    >>> attacker.attack(target, damage=900)
    >>> target.health
    Health(points=100)
"""

import logging

from combat_core.components import Health, Level
from combat_core.config import DEFAULT_SPAWN
from combat_core.errors import InvalidOperationError
from combat_core.types import HitPoints

logger = logging.getLogger(__name__)

_SPAWN_TOKEN = object()


class Character:
    """Mutable combat entity; construct with :meth:`spawn`."""

    __slots__ = ("_health", "_level")

    def __init__(self, health: Health, level: Level, *, _token: object = None) -> None:
        if _token is not _SPAWN_TOKEN:
            raise TypeError("Characters are created with Character.spawn()")
        self._health = health
        self._level = level

    @classmethod
    def spawn(cls) -> "Character":
        """Return a new living character with the default health and level."""
        return cls(
            Health.at(DEFAULT_SPAWN.health),
            Level.of(DEFAULT_SPAWN.level),
            _token=_SPAWN_TOKEN,
        )

    @property
    def health(self) -> Health:
        return self._health

    @property
    def level(self) -> Level:
        return self._level

    def is_alive(self) -> bool:
        return not self._health.is_empty()

    def attack(self, target: "Character", damage: HitPoints) -> None:
        """Deal ``damage`` to ``target``. The attacker is unaffected."""
        before = target._health
        target._health = before.subtract(damage)
        logger.debug(
            "attack: %d damage, target %d -> %d%s",
            damage,
            before.points,
            target._health.points,
            " (lethal)" if target._health.is_empty() and not before.is_empty() else "",
        )

    def heal(self, target: "Character", amount: HitPoints) -> None:
        """Restore ``amount`` points to a living ``target``.

        Raises:
            InvalidOperationError: If ``target`` is dead. No state changes.
        """
        before = target._health
        if before.is_empty():
            logger.warning("heal rejected: target is dead (amount=%s)", amount)
            raise InvalidOperationError("heal", "Cannot heal a dead character")
        target._health = before.add(amount)
        logger.debug(
            "heal: %d amount, target %d -> %d",
            amount,
            before.points,
            target._health.points,
        )

    def die(self) -> None:
        self._health = Health.empty()
        logger.debug("die: health emptied")

    def __repr__(self) -> str:
        return f"Character(health={self._health.points}, level={self._level.value})"
