"""components.party — Party members and their health."""

from __future__ import annotations
from dataclasses import dataclass

from core.constants import MAX_HEALTH


@dataclass
class PartyMember:
    """One traveller.

    ``health`` runs from 0 (incapacitated) to ``MAX_HEALTH``.  Members
    are never removed from the roster; a member at 0 simply stops
    counting as alive.
    """
    name: str
    health: int = MAX_HEALTH

    @property
    def alive(self) -> bool:
        return self.health > 0


def make_party(names, health: int = MAX_HEALTH) -> list[PartyMember]:
    """Build the starting roster, leader first."""
    return [PartyMember(name=name, health=health) for name in names]


def living(party: list[PartyMember]) -> list[PartyMember]:
    return [m for m in party if m.alive]
