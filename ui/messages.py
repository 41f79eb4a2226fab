"""ui.messages — Turn structured outcomes into the text the player reads.

The simulation only reports *what* happened (``core.events``); the
wording lives here so the rules stay UI-agnostic.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable

from core.events import (
    ActionUnavailable, CannotTravel, DiseaseStruck, FoodSpoiled, GameAlreadyOver,
    GoodWeather, Hunted, HuntingInjury, JourneyStarted, NoSpareParts, OxLost,
    Repaired, Rested, RestWithoutFood, ReturnedToTrail, Starving, SuppliesChecked,
    Traveled, UnknownAction, WagonBroke,
)
from simulation.actions import Status
from simulation.snapshot import Snapshot


EVENT_PREFIX = "**RANDOM EVENT:** "


def _cannot_travel(o: CannotTravel) -> str:
    if o.reason == "no_oxen":
        return "You have no oxen!"
    return "You cannot travel with a broken wagon!"


def _unavailable(o: ActionUnavailable) -> str:
    if o.scene == "broken_wagon":
        return "The wagon must be repaired first."
    return "That is not possible right now."


# Outcome type → formatter.  Unlisted types fall back to the class name.
_FORMATTERS: dict[type, Callable[[Any], str]] = {
    JourneyStarted: lambda o: "The journey has begun! Head west!",
    Traveled: lambda o: f"You traveled {o.miles} miles today.",
    CannotTravel: _cannot_travel,
    Starving: lambda o: "Your party is starving! Health is dropping.",
    Hunted: lambda o: (f"You spent the day hunting and gained "
                       f"{o.food_gained} lbs of food."),
    HuntingInjury: lambda o: (f"The {o.member} sustained a minor injury "
                              f"while hunting (-{o.damage} Health)."),
    Rested: lambda o: "You rested for a day. Party members feel better.",
    RestWithoutFood: lambda o: "But you have no food, and rest offers little comfort.",
    SuppliesChecked: lambda o: "You take stock of your supplies.",
    Repaired: lambda o: "The wagon is repaired using one spare part. Back on the trail!",
    NoSpareParts: lambda o: "You do not have any spare wagon parts to perform the repair.",
    ReturnedToTrail: lambda o: "You return to the trail.",
    ActionUnavailable: _unavailable,
    UnknownAction: lambda o: f"Nothing happens ({o.action!r} is not a trail action).",
    GameAlreadyOver: lambda o: "The journey is over.",

    # ── Random events ──────────────────────────────────────────────
    DiseaseStruck: lambda o: f"{EVENT_PREFIX}{o.member} has fallen ill! Health reduced.",
    OxLost: lambda o: (f"{EVENT_PREFIX}One of your oxen has died. "
                       f"Travel speed will be slower."),
    GoodWeather: lambda o: f"{EVENT_PREFIX}Excellent weather! You gain a slight travel bonus.",
    FoodSpoiled: lambda o: (f"{EVENT_PREFIX}A sudden storm ruined some of your "
                            f"food supply (-{o.lost} food)."),
    WagonBroke: lambda o: f"{EVENT_PREFIX}A wagon wheel broke! You must stop and repair it.",
}


def describe(outcome) -> str:
    """Human-readable line for one outcome."""
    fmt = _FORMATTERS.get(type(outcome))
    if fmt is None:
        return type(outcome).__name__
    return fmt(outcome)


# ── Status line ─────────────────────────────────────────────────────

def status_message(snap: Snapshot) -> str:
    if snap.status is Status.WON:
        return (f"CONGRATULATIONS! You reached the destination in "
                f"{snap.day} days!")
    if snap.status is Status.LOST:
        return "GAME OVER. Your party perished or your wagon is stranded."
    return f"Distance to go: {snap.remaining} miles."


@dataclass(frozen=True)
class TurnText:
    """Everything textual the view shows for one turn."""
    scene_text: str
    status_message: str
    event_messages: tuple[str, ...]


def turn_text(snap: Snapshot) -> TurnText:
    return TurnText(
        scene_text=snap.scene_text,
        status_message=status_message(snap),
        event_messages=tuple(describe(o) for o in snap.outcomes),
    )
