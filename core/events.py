"""core/events.py — Structured outcomes of a dispatched action.

The simulation never builds display strings.  Every handler and every
random event reports *what happened* as one of the plain dataclasses
below, and the view turns them into text (see ``ui/messages.py``)::

    result = dispatch("travel", state, rng)
    for outcome in result.outcomes:
        print(describe(outcome))

Design rules:
  - Outcomes are plain dataclasses with no behaviour.
  - They carry the numbers the view needs, never pre-formatted text.
  - Order in ``DispatchResult.outcomes`` is the order things happened.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


# ═══════════════════════════════════════════════════════════════════
#  Action outcomes
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class JourneyStarted:
    destination: int


@dataclass(frozen=True, slots=True)
class Traveled:
    """Distance covered today, bonus included."""
    miles: int


@dataclass(frozen=True, slots=True)
class CannotTravel:
    """Travel refused.  ``reason`` is ``"no_oxen"`` or ``"broken_wagon"``."""
    reason: str


@dataclass(frozen=True, slots=True)
class Starving:
    """Food ran out on the trail — every member lost health."""
    damage: int


@dataclass(frozen=True, slots=True)
class Hunted:
    food_gained: int


@dataclass(frozen=True, slots=True)
class HuntingInjury:
    member: str
    damage: int


@dataclass(frozen=True, slots=True)
class Rested:
    healed: int


@dataclass(frozen=True, slots=True)
class RestWithoutFood:
    damage: int


@dataclass(frozen=True, slots=True)
class SuppliesChecked:
    food: int
    oxen: int
    wagon_parts: int


@dataclass(frozen=True, slots=True)
class Repaired:
    parts_left: int


@dataclass(frozen=True, slots=True)
class NoSpareParts:
    pass


@dataclass(frozen=True, slots=True)
class ReturnedToTrail:
    pass


@dataclass(frozen=True, slots=True)
class ActionUnavailable:
    """A known action that makes no sense in the current scene."""
    action: str
    scene: str


@dataclass(frozen=True, slots=True)
class UnknownAction:
    action: str


@dataclass(frozen=True, slots=True)
class GameAlreadyOver:
    scene: str


# ═══════════════════════════════════════════════════════════════════
#  Random event outcomes
# ═══════════════════════════════════════════════════════════════════

@dataclass(frozen=True, slots=True)
class DiseaseStruck:
    member: str
    damage: int
    health: int


@dataclass(frozen=True, slots=True)
class OxLost:
    oxen_left: int


@dataclass(frozen=True, slots=True)
class GoodWeather:
    bonus_distance: int


@dataclass(frozen=True, slots=True)
class FoodSpoiled:
    lost: int
    food_left: int


@dataclass(frozen=True, slots=True)
class WagonBroke:
    pass


RandomOutcome = Union[DiseaseStruck, OxLost, GoodWeather, FoodSpoiled, WagonBroke]

# Every outcome type a dispatch can report
Outcome = Union[
    JourneyStarted, Traveled, CannotTravel, Starving, Hunted, HuntingInjury,
    Rested, RestWithoutFood, SuppliesChecked, Repaired, NoSpareParts,
    ReturnedToTrail, ActionUnavailable, UnknownAction, GameAlreadyOver,
    RandomOutcome,
]
