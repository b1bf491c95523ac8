from typing import List, Tuple

from combat_core.character import Character
from combat_core.roster import Roster
from combat_core.types import EntityID


def spawn_pair() -> Tuple[Character, Character]:
    """Return (actor, target), both freshly spawned."""
    return Character.spawn(), Character.spawn()


def spawn_dead() -> Character:
    character = Character.spawn()
    character.die()
    return character


def make_roster(n: int = 2) -> Tuple[Roster, List[EntityID]]:
    """Return a roster with ``n`` spawned characters and their IDs in order."""
    roster = Roster.empty()
    ids: List[EntityID] = []
    for _ in range(n):
        roster, eid = roster.spawn()
        ids.append(eid)
    return roster, ids
