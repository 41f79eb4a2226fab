"""test_ledger.py — Clamped resource accounting.

Run:  python test_ledger.py
"""
from __future__ import annotations

from components import Journal, PartyMember, StartConfig
from simulation import ledger
from simulation.state import new_game
from testkit import run_tests


def test_food_never_goes_negative():
    state = new_game(StartConfig(food=30))
    assert ledger.adjust_food(state, -50) == 0
    assert state.supplies.food == 0
    assert ledger.adjust_food(state, 120) == 120


def test_oxen_and_parts_floor_at_zero():
    state = new_game(StartConfig(oxen=1, wagon_parts=0))
    ledger.adjust_oxen(state, -3)
    ledger.adjust_wagon_parts(state, -1)
    assert state.supplies.oxen == 0
    assert state.supplies.wagon_parts == 0


def test_health_clamped_to_zero_and_hundred():
    member = PartyMember("Leader", 95)
    assert ledger.adjust_health(member, 10) == 100
    assert ledger.adjust_health(member, -250) == 0
    assert not member.alive


def test_party_health_applies_to_everyone():
    state = new_game()
    state.party[2].health = 3
    ledger.adjust_party_health(state, -5)
    assert [m.health for m in state.party] == [95, 95, 0, 95]


def test_advance_day_and_distance():
    state = new_game()
    assert ledger.advance_day(state) == 1
    assert ledger.advance_day(state) == 2
    assert ledger.advance_distance(state, 40) == 40
    assert ledger.advance_distance(state, -100) == 0


def test_new_game_uses_start_config():
    state = new_game(StartConfig(food=10, oxen=3, wagon_parts=2, destination=500,
                                 party_names=("Ma", "Pa"), start_health=80))
    s = state.supplies
    assert (s.day, s.distance, s.food, s.oxen, s.wagon_parts) == (0, 0, 10, 3, 2)
    assert state.destination == 500
    assert [(m.name, m.health) for m in state.party] == [("Ma", 80), ("Pa", 80)]
    assert state.scene.value == "initial"


def test_new_game_clamps_negative_start_values():
    state = new_game(StartConfig(food=-5, oxen=-1))
    assert state.supplies.food == 0
    assert state.supplies.oxen == 0


def test_journal_keeps_only_the_newest_entries():
    journal = Journal(max_entries=3)
    for day in range(5):
        journal.record(day, "action", "rest")
    assert [e.day for e in journal.entries] == [2, 3, 4]
    assert str(journal.recent(1)[0]) == "Day 4: action rest"
    assert journal.recent(0) == []
    assert len(journal.for_day(3)) == 1


if __name__ == "__main__":
    run_tests(globals(), "Ledger Tests")
