"""simulation/scene_graph.py — Narrative scenes and their choices.

The set of scenes is closed: every ``SceneId`` has one text renderer and
one choice list below.  Scenes never change themselves; the dispatcher
moves ``GameState.scene`` between them.

    initial ──initial_start──▶ main ◀──main── supplies
                                │  ▲
                     wagonBreak │  │ repair
                                ▼  │
                            broken_wagon

    any non-terminal ──status──▶ end_win | end_lose
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from simulation.actions import Action
    from simulation.state import GameState


class SceneId(str, Enum):
    INITIAL = "initial"
    MAIN = "main"
    SUPPLIES = "supplies"
    BROKEN_WAGON = "broken_wagon"
    END_WIN = "end_win"
    END_LOSE = "end_lose"


TERMINAL_SCENES = frozenset({SceneId.END_WIN, SceneId.END_LOSE})


@dataclass(frozen=True, slots=True)
class Choice:
    label: str
    action: Action


# ═════════════════════════════════════════════════════════════════════
#  TEXT RENDERERS
# ═════════════════════════════════════════════════════════════════════


def _initial_text(state: GameState) -> str:
    return (f"Welcome to the Oregon Trail! Your goal is to travel "
            f"{state.destination} miles to your destination. "
            f"Click Start to begin.")


def _main_text(state: GameState) -> str:
    return "You are on the trail. What is your next move?"


def _supplies_text(state: GameState) -> str:
    s = state.supplies
    return (f"Current Supplies:\n"
            f"Food: {s.food} lbs\n"
            f"Oxen: {s.oxen}\n"
            f"Spare Parts: {s.wagon_parts}")


def _broken_wagon_text(state: GameState) -> str:
    return "Your wagon is broken! You must repair it before moving on."


def _end_win_text(state: GameState) -> str:
    return (f"You reached the end of the trail after "
            f"{state.supplies.day} days.")


def _end_lose_text(state: GameState) -> str:
    return "Your journey has come to an end on the trail."


_RENDERERS: dict[SceneId, Callable[[GameState], str]] = {
    SceneId.INITIAL: _initial_text,
    SceneId.MAIN: _main_text,
    SceneId.SUPPLIES: _supplies_text,
    SceneId.BROKEN_WAGON: _broken_wagon_text,
    SceneId.END_WIN: _end_win_text,
    SceneId.END_LOSE: _end_lose_text,
}


def _build_choices() -> dict[SceneId, tuple[Choice, ...]]:
    # Deferred so Action can import SceneId without a cycle
    from simulation.actions import Action

    return {
        SceneId.INITIAL: (
            Choice("Start Journey", Action.INITIAL_START),
        ),
        SceneId.MAIN: (
            Choice("Travel Forward", Action.TRAVEL),
            Choice("Stop and Hunt", Action.HUNT),
            Choice("Rest for a Day", Action.REST),
            Choice("Check Supplies", Action.SUPPLIES),
        ),
        SceneId.SUPPLIES: (
            Choice("Return to Trail", Action.MAIN),
        ),
        SceneId.BROKEN_WAGON: (
            Choice("Use a Spare Part (1 needed)", Action.REPAIR),
            Choice("Rest and Wait (DANGER)", Action.REST),
        ),
        SceneId.END_WIN: (),
        SceneId.END_LOSE: (),
    }


_choices: dict[SceneId, tuple[Choice, ...]] | None = None


# ═════════════════════════════════════════════════════════════════════
#  PUBLIC API
# ═════════════════════════════════════════════════════════════════════


def is_terminal(scene: SceneId) -> bool:
    return scene in TERMINAL_SCENES


def scene_text(state: GameState) -> str:
    """Render the current scene's text from live state (never cached)."""
    return _RENDERERS[state.scene](state)


def scene_choices(scene: SceneId) -> tuple[Choice, ...]:
    """Ordered choices offered in *scene*.  Terminal scenes offer none."""
    global _choices
    if _choices is None:
        _choices = _build_choices()
    return _choices[scene]


assert set(_RENDERERS) == set(SceneId), "every scene needs a text renderer"
