"""Persistent character registry.

Host applications that need to enumerate characters keep them in a
:class:`Roster`: a frozen dataclass wrapping a persistent map from
``EntityID`` to :class:`~combat_core.character.Character`. Membership is
persistent: ``spawn`` and ``remove`` return a new roster and leave the old one
unchanged. Characters are not copied, so every roster version holds the same
mutable ``Character`` objects and combat through one version is visible in all
of them.

Design notes:

* IDs come from the roster's own ``next_id`` counter. A removed ID is never
  handed out again by descendants of that roster.
* ``remove`` drops a character from the registry. It is unrelated to
  :meth:`Character.die`, which only empties health.
* ``attack`` / ``heal`` resolve both IDs before acting, so an unknown ID raises
  ``KeyError`` with no character touched.
"""

from dataclasses import dataclass, replace
from typing import Tuple

from pyrsistent import PMap, PSet, pmap, pset

from combat_core.character import Character
from combat_core.components import Health
from combat_core.types import EntityID, HitPoints


@dataclass(frozen=True)
class Roster:
    """Registry of characters keyed by entity ID.

    Attributes:
        character (PMap[EntityID, Character]): Registered characters, shared
            with every roster derived from this one.
        next_id (EntityID): ID the next ``spawn`` allocates.
    """

    character: PMap[EntityID, Character] = pmap()
    next_id: EntityID = 0

    @classmethod
    def empty(cls) -> "Roster":
        return cls()

    def spawn(self) -> Tuple["Roster", EntityID]:
        """Spawn a character and return the new roster with its ID."""
        eid = self.next_id
        roster = Roster(
            character=self.character.set(eid, Character.spawn()), next_id=eid + 1
        )
        return roster, eid

    def get(self, eid: EntityID) -> Character:
        if eid not in self.character:
            raise KeyError(f"Unknown character: {eid}")
        return self.character[eid]

    def remove(self, eid: EntityID) -> "Roster":
        if eid not in self.character:
            raise KeyError(f"Unknown character: {eid}")
        return replace(self, character=self.character.remove(eid))

    def ids(self) -> PSet[EntityID]:
        return pset(self.character.keys())

    def alive_ids(self) -> PSet[EntityID]:
        return pset(eid for eid, c in self.character.items() if c.is_alive())

    def dead_ids(self) -> PSet[EntityID]:
        return pset(eid for eid, c in self.character.items() if not c.is_alive())

    def snapshot(self) -> PMap[EntityID, Health]:
        """Current health of every registered character."""
        return pmap({eid: c.health for eid, c in self.character.items()})

    def attack(
        self, attacker_id: EntityID, target_id: EntityID, damage: HitPoints
    ) -> None:
        attacker, target = self.get(attacker_id), self.get(target_id)
        attacker.attack(target, damage)

    def heal(self, healer_id: EntityID, target_id: EntityID, amount: HitPoints) -> None:
        healer, target = self.get(healer_id), self.get(target_id)
        healer.heal(target, amount)

    def __contains__(self, eid: object) -> bool:
        return eid in self.character

    def __len__(self) -> int:
        return len(self.character)
