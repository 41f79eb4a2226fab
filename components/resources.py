"""components.resources — Trail supplies and starting configuration."""

from __future__ import annotations
from dataclasses import dataclass

from core import tuning
from core.constants import MAX_HEALTH


DEFAULT_PARTY = ("Leader", "Spouse", "Child 1", "Child 2")


@dataclass
class Supplies:
    """Numeric trail state.

    Every field stays non-negative; mutate through
    ``simulation.ledger`` so the clamps are applied.
    """
    day: int = 0
    distance: int = 0          # mi travelled so far
    food: int = 0              # lb
    oxen: int = 0
    wagon_parts: int = 0


@dataclass(frozen=True)
class StartConfig:
    """Starting supplies and roster for a new journey.

    Tests override individual fields directly::

        StartConfig(food=0, oxen=1)

    The game builds one from ``data/tuning.toml`` via ``from_tuning()``.
    """
    food: int = 500
    oxen: int = 2
    wagon_parts: int = 1
    destination: int = 2000
    party_names: tuple[str, ...] = DEFAULT_PARTY
    start_health: int = MAX_HEALTH

    @classmethod
    def from_tuning(cls) -> StartConfig:
        """Read the ``[start]`` table, keeping defaults for missing keys."""
        base = cls()
        names = tuning.get("start", "party", None)
        return cls(
            food=int(tuning.get("start", "food", base.food)),
            oxen=int(tuning.get("start", "oxen", base.oxen)),
            wagon_parts=int(tuning.get("start", "wagon_parts", base.wagon_parts)),
            destination=int(tuning.get("start", "destination", base.destination)),
            party_names=tuple(names) if names else base.party_names,
            start_health=int(tuning.get("start", "health", base.start_health)),
        )
