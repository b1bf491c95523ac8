"""Common type aliases.

Characters held by a :class:`combat_core.roster.Roster` are addressed by an
``EntityID``; raw hit point magnitudes travel as plain ``int`` values.
"""

EntityID = int

HitPoints = int
