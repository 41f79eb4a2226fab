"""simulation/actions.py — Action dispatcher and win/lose evaluation.

The view forwards a chosen action id; ``dispatch`` looks up its handler,
lets it mutate the ``GameState``, then evaluates the journey status::

    result = dispatch("travel", state, rng)
    result.status        # Status.ONGOING / WON / LOST
    result.outcomes      # structured record of what happened, in order

Nothing here raises for a bad request.  Refused actions (travel without
oxen, repair without parts, anything after the journey ended) leave the
state untouched and report why through an outcome.

Handler signature: ``handler(state, rng, outcomes) -> None``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from core.constants import (
    HUNT_INJURY_CHANCE, HUNT_INJURY_DAMAGE, HUNT_MAX_FOOD, HUNT_MIN_FOOD,
    HUNT_RATION, MAX_TRAVEL_RATE, MILES_PER_OX, MIN_TRAVEL_RATE, REST_HEAL,
    REST_RATION, STARVE_DAMAGE, STARVE_GRACE_DAYS, TRAVEL_RATION,
)
from core.events import (
    ActionUnavailable, CannotTravel, GameAlreadyOver, Hunted, HuntingInjury,
    JourneyStarted, NoSpareParts, Outcome, Repaired, Rested, RestWithoutFood,
    ReturnedToTrail, Starving, SuppliesChecked, Traveled, UnknownAction,
)
from simulation import ledger
from simulation.events import EventResult, maybe_trigger
from simulation.scene_graph import SceneId, is_terminal
from simulation.state import GameState


class Action(str, Enum):
    TRAVEL = "travel"
    HUNT = "hunt"
    REST = "rest"
    SUPPLIES = "supplies"
    REPAIR = "repair"
    INITIAL_START = "initial_start"
    MAIN = "main"


class Status(str, Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass
class DispatchResult:
    status: Status
    outcomes: list[Outcome] = field(default_factory=list)
    remaining: int = 0


# ═════════════════════════════════════════════════════════════════════
#  HANDLERS
# ═════════════════════════════════════════════════════════════════════


def _note_event(result: EventResult, outcomes: list[Outcome]) -> None:
    if result.outcome is not None:
        outcomes.append(result.outcome)


def _settle_scene(state: GameState) -> None:
    """Back to the hub after a day's work, unless the wagon broke."""
    if state.scene != SceneId.BROKEN_WAGON:
        state.scene = SceneId.MAIN


def _travel(state: GameState, rng, outcomes: list[Outcome]) -> None:
    s = state.supplies
    if s.oxen == 0:
        outcomes.append(CannotTravel(reason="no_oxen"))
        return
    if state.scene == SceneId.BROKEN_WAGON:
        outcomes.append(CannotTravel(reason="broken_wagon"))
        return

    ledger.advance_day(state)
    rate = min(MAX_TRAVEL_RATE, max(MIN_TRAVEL_RATE, s.oxen * MILES_PER_OX))
    ledger.adjust_food(state, -len(state.party) * TRAVEL_RATION)

    event = maybe_trigger(rng, state)
    _note_event(event, outcomes)
    rate += event.bonus_distance

    ledger.advance_distance(state, rate)
    outcomes.append(Traveled(miles=rate))

    if s.food == 0:
        ledger.adjust_party_health(state, -STARVE_DAMAGE)
        outcomes.append(Starving(damage=STARVE_DAMAGE))

    _settle_scene(state)


def _hunt(state: GameState, rng, outcomes: list[Outcome]) -> None:
    ledger.advance_day(state)
    gained = rng.randint(HUNT_MIN_FOOD, HUNT_MAX_FOOD)
    # Gain first, then the day's ration, each step clamped
    ledger.adjust_food(state, gained)
    ledger.adjust_food(state, -HUNT_RATION)
    outcomes.append(Hunted(food_gained=gained))

    if rng.random() < HUNT_INJURY_CHANCE:
        ledger.adjust_health(state.leader, -HUNT_INJURY_DAMAGE)
        outcomes.append(HuntingInjury(member=state.leader.name,
                                      damage=HUNT_INJURY_DAMAGE))

    # Hunting covers no ground, so a weather bonus is simply lost
    _note_event(maybe_trigger(rng, state), outcomes)
    _settle_scene(state)


def _rest(state: GameState, rng, outcomes: list[Outcome]) -> None:
    ledger.advance_day(state)
    ledger.adjust_party_health(state, REST_HEAL)
    ledger.adjust_food(state, -len(state.party) * REST_RATION)
    outcomes.append(Rested(healed=REST_HEAL))

    if state.supplies.food == 0:
        ledger.adjust_party_health(state, -STARVE_DAMAGE)
        outcomes.append(RestWithoutFood(damage=STARVE_DAMAGE))

    _note_event(maybe_trigger(rng, state), outcomes)
    _settle_scene(state)


def _supplies(state: GameState, rng, outcomes: list[Outcome]) -> None:
    if state.scene == SceneId.BROKEN_WAGON:
        outcomes.append(ActionUnavailable(action=Action.SUPPLIES.value,
                                          scene=state.scene.value))
        return
    s = state.supplies
    state.scene = SceneId.SUPPLIES
    outcomes.append(SuppliesChecked(food=s.food, oxen=s.oxen,
                                    wagon_parts=s.wagon_parts))


def _repair(state: GameState, rng, outcomes: list[Outcome]) -> None:
    if state.supplies.wagon_parts <= 0:
        outcomes.append(NoSpareParts())
        return
    left = ledger.adjust_wagon_parts(state, -1)
    state.scene = SceneId.MAIN
    outcomes.append(Repaired(parts_left=left))


def _initial_start(state: GameState, rng, outcomes: list[Outcome]) -> None:
    if state.scene != SceneId.INITIAL:
        outcomes.append(ActionUnavailable(action=Action.INITIAL_START.value,
                                          scene=state.scene.value))
        return
    state.scene = SceneId.MAIN
    outcomes.append(JourneyStarted(destination=state.destination))


def _main(state: GameState, rng, outcomes: list[Outcome]) -> None:
    if state.scene == SceneId.BROKEN_WAGON:
        outcomes.append(ActionUnavailable(action=Action.MAIN.value,
                                          scene=state.scene.value))
        return
    if state.scene != SceneId.MAIN:
        outcomes.append(ReturnedToTrail())
    state.scene = SceneId.MAIN


_HANDLERS = {
    Action.TRAVEL: _travel,
    Action.HUNT: _hunt,
    Action.REST: _rest,
    Action.SUPPLIES: _supplies,
    Action.REPAIR: _repair,
    Action.INITIAL_START: _initial_start,
    Action.MAIN: _main,
}

_missing = set(Action) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"actions without a handler: {sorted(a.value for a in _missing)}")


# ═════════════════════════════════════════════════════════════════════
#  STATUS
# ═════════════════════════════════════════════════════════════════════


def evaluate_status(state: GameState) -> Status:
    """Win beats lose; a terminal verdict moves the scene to an end state.

    Running out of food only ends the journey after the first
    ``STARVE_GRACE_DAYS`` days.
    """
    s = state.supplies
    if s.distance >= state.destination:
        state.scene = SceneId.END_WIN
        return Status.WON

    out_of_food = (s.food == 0 and s.distance < state.destination
                   and s.day > STARVE_GRACE_DAYS)
    if state.alive_count == 0 or s.oxen == 0 or out_of_food:
        state.scene = SceneId.END_LOSE
        return Status.LOST

    return Status.ONGOING


def _terminal_status(scene: SceneId) -> Status:
    return Status.WON if scene == SceneId.END_WIN else Status.LOST


# ═════════════════════════════════════════════════════════════════════
#  DISPATCH
# ═════════════════════════════════════════════════════════════════════


def dispatch(action_id: str | Action, state: GameState, rng) -> DispatchResult:
    """Apply one chosen action to *state* and report the journey status.

    *rng* needs ``random()``, ``randint()`` and ``choice()``.
    """
    if is_terminal(state.scene):
        return DispatchResult(status=_terminal_status(state.scene),
                              outcomes=[GameAlreadyOver(scene=state.scene.value)],
                              remaining=state.remaining)

    outcomes: list[Outcome] = []
    try:
        action = Action(action_id)
    except ValueError:
        print(f"[TRAIL] Ignoring unknown action {action_id!r}")
        outcomes.append(UnknownAction(action=str(action_id)))
    else:
        _HANDLERS[action](state, rng, outcomes)
        state.journal.record(state.supplies.day, "action", action.value,
                             details={"outcomes": [type(o).__name__ for o in outcomes]})

    status = evaluate_status(state)
    if status is not Status.ONGOING:
        state.journal.record(state.supplies.day, "status", status.value,
                             details={"distance": state.supplies.distance})
        print(f"[TRAIL] Journey {status.value} on day {state.supplies.day} "
              f"at {state.supplies.distance} mi")

    return DispatchResult(status=status, outcomes=outcomes,
                          remaining=state.remaining)
