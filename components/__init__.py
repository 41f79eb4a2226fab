"""components — Trail data types, organised by domain.

Submodules
----------
party       PartyMember, make_party, living
resources   Supplies, StartConfig
journal     Journal, JournalEntry

All public names are re-exported here so callers can write
``from components import PartyMember``.
"""

# ── Party ────────────────────────────────────────────────────────────
from components.party import PartyMember, make_party, living

# ── Supplies / configuration ─────────────────────────────────────────
from components.resources import Supplies, StartConfig, DEFAULT_PARTY

# ── Journal ──────────────────────────────────────────────────────────
from components.journal import Journal, JournalEntry

__all__ = [
    "PartyMember", "make_party", "living",
    "Supplies", "StartConfig", "DEFAULT_PARTY",
    "Journal", "JournalEntry",
]
