"""simulation/events.py — Random trail events.

Called once per turn-consuming action (travel, hunt, rest).  Each call
fires at most one event:

    1. roll u in [0, 1);  u >= EVENT_CHANCE → nothing happens
    2. roll r in [0, total weight)
    3. walk EVENT_TABLE in declared order, first cumulative weight > r wins
    4. apply its effect to the GameState in place

Each effect has signature ``effect(state, rng) -> RandomOutcome | None``
and returns ``None`` when it had nothing to act on (no living members,
no oxen, wagon already broken).

The table is fixed.  Weights are relative, not probabilities: they sum
to 0.55, not 1.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from components import living
from core.constants import EVENT_CHANCE
from core.events import (
    DiseaseStruck, FoodSpoiled, GoodWeather, OxLost, RandomOutcome, WagonBroke,
)
from simulation import ledger
from simulation.scene_graph import SceneId
from simulation.state import GameState


class EventKind(str, Enum):
    DISEASE = "disease"
    OXEN_LOSS = "oxenLoss"
    GOOD_WEATHER = "goodWeather"
    BAD_LUCK = "badLuck"
    WAGON_BREAK = "wagonBreak"


DISEASE_DAMAGE = 25
WEATHER_BONUS = 15
STORM_FOOD_LOSS = 50


@dataclass(frozen=True, slots=True)
class EventDefinition:
    kind: EventKind
    odds: float
    effect: Callable[[GameState, Any], RandomOutcome | None]


@dataclass(frozen=True, slots=True)
class EventResult:
    """What ``maybe_trigger`` did.  ``kind`` is None when nothing fired."""
    kind: EventKind | None = None
    outcome: RandomOutcome | None = None
    bonus_distance: int = 0

    @property
    def fired(self) -> bool:
        return self.kind is not None


NO_EVENT = EventResult()


# ═════════════════════════════════════════════════════════════════════
#  EFFECTS
# ═════════════════════════════════════════════════════════════════════


def _disease(state: GameState, rng) -> DiseaseStruck | None:
    pool = living(state.party)
    if not pool:
        return None
    victim = rng.choice(pool)
    ledger.adjust_health(victim, -DISEASE_DAMAGE)
    return DiseaseStruck(member=victim.name, damage=DISEASE_DAMAGE,
                         health=victim.health)


def _oxen_loss(state: GameState, rng) -> OxLost | None:
    if state.supplies.oxen <= 0:
        return None
    left = ledger.adjust_oxen(state, -1)
    return OxLost(oxen_left=left)


def _good_weather(state: GameState, rng) -> GoodWeather:
    return GoodWeather(bonus_distance=WEATHER_BONUS)


def _bad_luck(state: GameState, rng) -> FoodSpoiled:
    before = state.supplies.food
    left = ledger.adjust_food(state, -STORM_FOOD_LOSS)
    return FoodSpoiled(lost=before - left, food_left=left)


def _wagon_break(state: GameState, rng) -> WagonBroke | None:
    if state.scene == SceneId.BROKEN_WAGON:
        return None
    state.scene = SceneId.BROKEN_WAGON
    return WagonBroke()


EVENT_TABLE: tuple[EventDefinition, ...] = (
    EventDefinition(EventKind.DISEASE, 0.15, _disease),
    EventDefinition(EventKind.OXEN_LOSS, 0.05, _oxen_loss),
    EventDefinition(EventKind.GOOD_WEATHER, 0.20, _good_weather),
    EventDefinition(EventKind.BAD_LUCK, 0.10, _bad_luck),
    EventDefinition(EventKind.WAGON_BREAK, 0.05, _wagon_break),
)


# ═════════════════════════════════════════════════════════════════════
#  SELECTION
# ═════════════════════════════════════════════════════════════════════


def select_event(roll: float,
                 table: tuple[EventDefinition, ...] = EVENT_TABLE
                 ) -> EventDefinition | None:
    """Weighted roulette: first entry whose cumulative odds exceed *roll*.

    *roll* is already scaled to ``[0, total weight)``.  Earlier entries
    win ties.
    """
    cumulative = 0.0
    for event in table:
        cumulative += event.odds
        if roll < cumulative:
            return event
    return None


def maybe_trigger(rng, state: GameState,
                  table: tuple[EventDefinition, ...] = EVENT_TABLE
                  ) -> EventResult:
    """Roll for a random event and apply it to *state*.

    *rng* needs ``random()`` and ``choice()`` (a ``random.Random`` will do).
    """
    if rng.random() >= EVENT_CHANCE:
        return NO_EVENT

    total = sum(event.odds for event in table)
    chosen = select_event(rng.random() * total, table)
    if chosen is None:
        return NO_EVENT

    outcome = chosen.effect(state, rng)
    bonus = outcome.bonus_distance if isinstance(outcome, GoodWeather) else 0

    state.journal.record(state.supplies.day, "event", chosen.kind.value,
                         details={"applied": outcome is not None})
    return EventResult(kind=chosen.kind, outcome=outcome, bonus_distance=bonus)
