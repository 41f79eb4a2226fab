"""simulation/state.py — The single owned game aggregate.

Everything the trail rules read or write lives on one ``GameState``
that is passed explicitly to the ledger, the event engine and the
dispatcher.  There are no module-level game variables.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from components import Journal, PartyMember, StartConfig, Supplies, make_party, living
from simulation.scene_graph import SceneId


@dataclass
class GameState:
    supplies: Supplies
    party: list[PartyMember]
    destination: int
    scene: SceneId = SceneId.INITIAL
    journal: Journal = field(default_factory=Journal)

    @property
    def alive_count(self) -> int:
        return len(living(self.party))

    @property
    def remaining(self) -> int:
        """Miles left to the destination (0 once arrived)."""
        return max(0, self.destination - self.supplies.distance)

    @property
    def leader(self) -> PartyMember:
        return self.party[0]


def new_game(config: StartConfig | None = None,
             journal_size: int = 200) -> GameState:
    """Fresh journey at day 0 in the ``initial`` scene."""
    cfg = config or StartConfig()
    supplies = Supplies(
        day=0,
        distance=0,
        food=max(0, cfg.food),
        oxen=max(0, cfg.oxen),
        wagon_parts=max(0, cfg.wagon_parts),
    )
    return GameState(
        supplies=supplies,
        party=make_party(cfg.party_names, cfg.start_health),
        destination=cfg.destination,
        journal=Journal(max_entries=journal_size),
    )
