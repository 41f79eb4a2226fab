"""test_actions.py — Action dispatcher, status evaluation and full journeys.

Covers the worked scenarios (plain travel, hunting, wagon breakdown,
arrival, stranded without oxen), the invariants that must hold for any
reachable state, and seeded determinism.

Run:  python test_actions.py
"""
from __future__ import annotations
import random
from dataclasses import asdict

from components import StartConfig
from core.constants import MAX_HEALTH
from core.events import (
    ActionUnavailable, CannotTravel, GameAlreadyOver, GoodWeather, Hunted,
    HuntingInjury, JourneyStarted, NoSpareParts, OxLost, Repaired, Rested,
    RestWithoutFood, ReturnedToTrail, Starving, SuppliesChecked, Traveled,
    UnknownAction, WagonBroke,
)
from simulation.actions import Action, Status, dispatch, evaluate_status
from simulation.scene_graph import SceneId, scene_choices, scene_text
from simulation.state import new_game
from testkit import (
    GOOD_WEATHER, INJURY, NO_EVENT, NO_INJURY, OXEN_LOSS, WAGON_BREAK,
    ScriptedRng, event_rolls, run_tests,
)
from ui.messages import describe


def _on_trail(**overrides):
    """A journey that has just left the initial scene."""
    state = new_game(StartConfig(**overrides))
    result = dispatch("initial_start", state, ScriptedRng())
    assert result.outcomes == [JourneyStarted(destination=state.destination)]
    return state


def _quiet():
    """RNG for a travel/rest day on which nothing random happens."""
    return ScriptedRng(randoms=[NO_EVENT])


# ═══════════════════════════════════════════════════════════════════════
#  WORKED SCENARIOS
# ═══════════════════════════════════════════════════════════════════════

def test_travel_without_event():
    state = _on_trail()
    result = dispatch("travel", state, _quiet())
    s = state.supplies
    assert (s.day, s.food, s.distance) == (1, 484, 40)
    assert result.outcomes == [Traveled(miles=40)]
    assert result.status is Status.ONGOING
    assert result.remaining == 1960
    assert state.scene is SceneId.MAIN


def test_hunt_without_injury_or_event():
    state = _on_trail()
    rng = ScriptedRng(randoms=[NO_INJURY, NO_EVENT], ints=[100])
    result = dispatch("hunt", state, rng)
    assert state.supplies.food == 590
    assert state.supplies.day == 1
    assert result.outcomes == [Hunted(food_gained=100)]
    assert rng.exhausted()


def test_wagon_break_blocks_travel():
    state = _on_trail()
    result = dispatch("travel", state, ScriptedRng(randoms=event_rolls(WAGON_BREAK)))
    assert state.scene is SceneId.BROKEN_WAGON
    assert WagonBroke() in result.outcomes
    assert state.supplies.distance == 40, "the day's travel still counts"

    again = dispatch("travel", state, ScriptedRng())
    assert again.outcomes == [CannotTravel(reason="broken_wagon")]
    assert "cannot travel with a broken wagon" in describe(again.outcomes[0]).lower()
    assert state.supplies.day == 1
    assert state.supplies.distance == 40
    assert state.scene is SceneId.BROKEN_WAGON


def test_arrival_wins_and_freezes_the_game():
    state = _on_trail()
    state.supplies.distance = 1990
    result = dispatch("travel", state, _quiet())
    assert state.supplies.distance >= 2000
    assert result.status is Status.WON
    assert state.scene is SceneId.END_WIN
    assert scene_choices(state.scene) == ()

    before = asdict(state.supplies)
    after = dispatch("rest", state, ScriptedRng())
    assert after.status is Status.WON
    assert after.outcomes == [GameAlreadyOver(scene="end_win")]
    assert asdict(state.supplies) == before


def test_no_oxen_loses_on_any_action():
    for action in ("supplies", "repair", "main", "travel"):
        state = _on_trail()
        state.supplies.oxen = 0
        result = dispatch(action, state, ScriptedRng())
        assert result.status is Status.LOST, action
        assert state.scene is SceneId.END_LOSE


# ═══════════════════════════════════════════════════════════════════════
#  TRAVEL
# ═══════════════════════════════════════════════════════════════════════

def test_travel_rate_scales_with_oxen_and_caps():
    for oxen, miles in ((1, 20), (2, 40), (3, 60), (6, 60)):
        state = _on_trail(oxen=oxen)
        dispatch("travel", state, _quiet())
        assert state.supplies.distance == miles, oxen


def test_good_weather_adds_bonus_distance():
    state = _on_trail()
    result = dispatch("travel", state, ScriptedRng(randoms=event_rolls(GOOD_WEATHER)))
    assert state.supplies.distance == 55
    assert result.outcomes == [GoodWeather(bonus_distance=15), Traveled(miles=55)]


def test_travel_without_oxen_is_refused_without_rolling():
    state = _on_trail()
    state.supplies.oxen = 0
    result = dispatch("travel", state, ScriptedRng())
    assert result.outcomes[0] == CannotTravel(reason="no_oxen")
    assert describe(result.outcomes[0]) == "You have no oxen!"
    assert state.supplies.day == 0


def test_losing_last_ox_ends_travel():
    state = _on_trail(oxen=1)
    result = dispatch("travel", state, ScriptedRng(randoms=event_rolls(OXEN_LOSS)))
    assert OxLost(oxen_left=0) in result.outcomes
    assert state.supplies.oxen == 0
    assert result.status is Status.LOST

    distance = state.supplies.distance
    dispatch("travel", state, ScriptedRng())
    assert state.supplies.distance == distance


def test_starving_on_the_trail():
    state = _on_trail(food=10)
    result = dispatch("travel", state, _quiet())
    assert state.supplies.food == 0
    assert Starving(damage=5) in result.outcomes
    assert [m.health for m in state.party] == [95] * 4
    assert result.status is Status.ONGOING, "day 1 is inside the grace period"


# ═══════════════════════════════════════════════════════════════════════
#  HUNT / REST
# ═══════════════════════════════════════════════════════════════════════

def test_hunt_gain_applied_before_ration():
    state = _on_trail(food=0)
    dispatch("hunt", state, ScriptedRng(randoms=[NO_INJURY, NO_EVENT], ints=[50]))
    assert state.supplies.food == 40


def test_hunting_injury_hits_the_leader():
    state = _on_trail()
    result = dispatch("hunt", state,
                      ScriptedRng(randoms=[INJURY, NO_EVENT], ints=[120]))
    assert state.leader.health == 90
    assert [m.health for m in state.party[1:]] == [100, 100, 100]
    assert result.outcomes == [Hunted(food_gained=120),
                               HuntingInjury(member="Leader", damage=10)]


def test_hunt_discards_weather_bonus():
    state = _on_trail()
    rng = ScriptedRng(randoms=[NO_INJURY] + event_rolls(GOOD_WEATHER), ints=[60])
    result = dispatch("hunt", state, rng)
    assert state.supplies.distance == 0
    assert GoodWeather(bonus_distance=15) in result.outcomes


def test_rest_heals_and_eats():
    state = _on_trail()
    for m in state.party:
        m.health = 50
    state.party[0].health = 95
    result = dispatch("rest", state, _quiet())
    assert [m.health for m in state.party] == [MAX_HEALTH, 60, 60, 60]
    assert state.supplies.food == 492
    assert state.supplies.day == 1
    assert result.outcomes == [Rested(healed=10)]


def test_rest_without_food_still_hurts():
    state = _on_trail(food=6)
    for m in state.party:
        m.health = 50
    result = dispatch("rest", state, _quiet())
    assert state.supplies.food == 0
    assert [m.health for m in state.party] == [55] * 4
    assert RestWithoutFood(damage=5) in result.outcomes


def test_rest_while_broken_keeps_wagon_broken():
    state = _on_trail()
    state.scene = SceneId.BROKEN_WAGON
    dispatch("rest", state, _quiet())
    assert state.scene is SceneId.BROKEN_WAGON
    assert state.supplies.day == 1


# ═══════════════════════════════════════════════════════════════════════
#  SUPPLIES / REPAIR / NAVIGATION
# ═══════════════════════════════════════════════════════════════════════

def test_supplies_is_idempotent():
    state = _on_trail()
    before = asdict(state.supplies)
    for _ in range(3):
        result = dispatch("supplies", state, ScriptedRng())
        assert result.outcomes == [SuppliesChecked(food=500, oxen=2, wagon_parts=1)]
        assert asdict(state.supplies) == before
    assert state.scene is SceneId.SUPPLIES


def test_supplies_text_is_rebuilt_each_time():
    state = _on_trail()
    dispatch("supplies", state, ScriptedRng())
    assert "Food: 500 lbs" in scene_text(state)
    state.supplies.food = 123
    assert "Food: 123 lbs" in scene_text(state)


def test_return_from_supplies():
    state = _on_trail()
    dispatch("supplies", state, ScriptedRng())
    result = dispatch("main", state, ScriptedRng())
    assert result.outcomes == [ReturnedToTrail()]
    assert state.scene is SceneId.MAIN


def test_repair_uses_a_part():
    state = _on_trail()
    state.scene = SceneId.BROKEN_WAGON
    result = dispatch("repair", state, ScriptedRng())
    assert result.outcomes == [Repaired(parts_left=0)]
    assert state.supplies.wagon_parts == 0
    assert state.scene is SceneId.MAIN
    assert state.supplies.day == 0


def test_repair_without_parts_is_refused():
    state = _on_trail(wagon_parts=0)
    state.scene = SceneId.BROKEN_WAGON
    result = dispatch("repair", state, ScriptedRng())
    assert result.outcomes == [NoSpareParts()]
    assert state.scene is SceneId.BROKEN_WAGON


def test_broken_wagon_cannot_be_left_by_navigation():
    state = _on_trail()
    state.scene = SceneId.BROKEN_WAGON
    for action in ("main", "supplies"):
        result = dispatch(action, state, ScriptedRng())
        assert isinstance(result.outcomes[0], ActionUnavailable), action
        assert state.scene is SceneId.BROKEN_WAGON


def test_initial_start_only_from_initial():
    state = _on_trail()
    result = dispatch("initial_start", state, ScriptedRng())
    assert result.outcomes == [ActionUnavailable(action="initial_start", scene="main")]
    assert state.scene is SceneId.MAIN


def test_unknown_action_changes_nothing():
    state = _on_trail()
    before = asdict(state.supplies)
    result = dispatch("ford_river", state, ScriptedRng())
    assert result.outcomes == [UnknownAction(action="ford_river")]
    assert result.status is Status.ONGOING
    assert asdict(state.supplies) == before


def test_dispatch_accepts_enum_members():
    state = _on_trail()
    dispatch(Action.TRAVEL, state, _quiet())
    assert state.supplies.distance == 40


# ═══════════════════════════════════════════════════════════════════════
#  STATUS
# ═══════════════════════════════════════════════════════════════════════

def test_win_beats_lose():
    state = _on_trail()
    state.supplies.distance = 2000
    state.supplies.oxen = 0
    for m in state.party:
        m.health = 0
    assert evaluate_status(state) is Status.WON
    assert state.scene is SceneId.END_WIN


def test_arrival_on_last_breath_still_wins():
    state = _on_trail(food=0)
    state.supplies.day = 10
    state.supplies.distance = 1990
    for m in state.party:
        m.health = 5
    result = dispatch("travel", state, _quiet())
    assert state.alive_count == 0
    assert result.status is Status.WON


def test_everyone_incapacitated_loses():
    state = _on_trail()
    for m in state.party:
        m.health = 0
    assert evaluate_status(state) is Status.LOST


def test_food_grace_period():
    state = _on_trail(food=0)
    state.supplies.day = 4
    result = dispatch("rest", state, _quiet())
    assert state.supplies.day == 5
    assert result.status is Status.ONGOING

    result = dispatch("rest", state, _quiet())
    assert state.supplies.day == 6
    assert result.status is Status.LOST
    assert state.scene is SceneId.END_LOSE


def test_status_changes_are_journaled():
    state = _on_trail()
    state.supplies.distance = 1999
    dispatch("travel", state, _quiet())
    assert state.journal.for_cat("status")[-1].msg == "won"


# ═══════════════════════════════════════════════════════════════════════
#  INVARIANTS / DETERMINISM
# ═══════════════════════════════════════════════════════════════════════

_TURN_ACTIONS = {"travel", "hunt", "rest"}


def _play(seed: int, turns: int):
    """Drive a journey with seeded random choices; yield after each turn."""
    rng = random.Random(seed)
    picker = random.Random(seed + 1)
    state = new_game()
    for _ in range(turns):
        choices = scene_choices(state.scene)
        if not choices:
            break
        action = picker.choice(choices).action
        day_before = state.supplies.day
        scene_before = state.scene
        result = dispatch(action, state, rng)
        yield state, action, day_before, scene_before, result


def test_invariants_hold_over_random_journeys():
    for seed in range(25):
        for state, action, day_before, scene_before, result in _play(seed, 400):
            s = state.supplies
            assert s.food >= 0 and s.oxen >= 0 and s.wagon_parts >= 0
            assert s.distance >= 0
            assert all(0 <= m.health <= MAX_HEALTH for m in state.party)

            refused = any(isinstance(o, (CannotTravel, ActionUnavailable))
                          for o in result.outcomes)
            if action.value in _TURN_ACTIONS and not refused:
                assert s.day == day_before + 1, (seed, action)
            else:
                assert s.day == day_before, (seed, action)

            if scene_before is SceneId.BROKEN_WAGON and action is not Action.REPAIR:
                assert state.scene in (SceneId.BROKEN_WAGON, SceneId.END_LOSE,
                                       SceneId.END_WIN)


def test_journeys_end():
    for seed in range(25):
        final = None
        for final, *_ in _play(seed, 2000):
            pass
        assert final.scene in (SceneId.END_WIN, SceneId.END_LOSE), seed


def test_same_seed_same_journey():
    def run(seed):
        trace = []
        for state, action, *_, result in _play(seed, 300):
            trace.append((action, asdict(state.supplies),
                          [m.health for m in state.party], state.scene,
                          result.status, tuple(result.outcomes)))
        return trace

    assert run(7) == run(7)
    assert run(7) != run(8)


if __name__ == "__main__":
    run_tests(globals(), "Action Tests")
