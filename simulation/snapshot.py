"""simulation/snapshot.py — Read-only view of the game for one turn.

The view never holds the live ``GameState``; it asks for a snapshot
after every dispatch and draws from that.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from core.events import Outcome
from simulation.actions import DispatchResult, Status
from simulation.scene_graph import Choice, SceneId, scene_choices, scene_text
from simulation.state import GameState


@dataclass(frozen=True)
class MemberView:
    name: str
    health: int


@dataclass(frozen=True)
class Snapshot:
    day: int
    distance: int
    destination: int
    food: int
    oxen: int
    wagon_parts: int
    party: tuple[MemberView, ...]
    scene_id: SceneId
    scene_text: str
    choices: tuple[Choice, ...]
    status: Status
    remaining: int
    outcomes: tuple[Outcome, ...] = field(default_factory=tuple)

    @property
    def party_health(self) -> list[int]:
        return [m.health for m in self.party]


def _status_of(state: GameState) -> Status:
    if state.scene == SceneId.END_WIN:
        return Status.WON
    if state.scene == SceneId.END_LOSE:
        return Status.LOST
    return Status.ONGOING


def take_snapshot(state: GameState,
                  result: DispatchResult | None = None) -> Snapshot:
    """Copy *state* for display.

    Without a *result* (the very first frame) the status is read from
    the scene, so building a snapshot never changes the game.
    """
    s = state.supplies
    if result is not None:
        status = result.status
        outcomes = tuple(result.outcomes)
    else:
        status = _status_of(state)
        outcomes = ()
    return Snapshot(
        day=s.day,
        distance=s.distance,
        destination=state.destination,
        food=s.food,
        oxen=s.oxen,
        wagon_parts=s.wagon_parts,
        party=tuple(MemberView(m.name, m.health) for m in state.party),
        scene_id=state.scene,
        scene_text=scene_text(state),
        choices=scene_choices(state.scene),
        status=status,
        remaining=state.remaining,
        outcomes=outcomes,
    )
