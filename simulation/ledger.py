"""simulation/ledger.py — Clamped resource accounting.

Every write to supplies or health goes through these helpers.  None of
them can fail: a request that would push a value out of range is
clamped to the nearest bound instead.

    food, oxen, wagon_parts, distance   >= 0
    health                              0 .. MAX_HEALTH
    day                                 +1 per call to advance_day()
"""

from __future__ import annotations

from components import PartyMember
from core.constants import MAX_HEALTH
from simulation.state import GameState


def _floor0(value: int) -> int:
    return max(0, value)


def adjust_food(state: GameState, delta: int) -> int:
    state.supplies.food = _floor0(state.supplies.food + delta)
    return state.supplies.food


def adjust_oxen(state: GameState, delta: int) -> int:
    state.supplies.oxen = _floor0(state.supplies.oxen + delta)
    return state.supplies.oxen


def adjust_wagon_parts(state: GameState, delta: int) -> int:
    state.supplies.wagon_parts = _floor0(state.supplies.wagon_parts + delta)
    return state.supplies.wagon_parts


def adjust_health(member: PartyMember, delta: int) -> int:
    member.health = max(0, min(MAX_HEALTH, member.health + delta))
    return member.health


def adjust_party_health(state: GameState, delta: int) -> None:
    """Apply *delta* to every member, living or not."""
    for member in state.party:
        adjust_health(member, delta)


def advance_day(state: GameState) -> int:
    """Unconditional.  Callers invoke it once per turn-consuming action."""
    state.supplies.day += 1
    return state.supplies.day


def advance_distance(state: GameState, delta: int) -> int:
    state.supplies.distance = _floor0(state.supplies.distance + delta)
    return state.supplies.distance
