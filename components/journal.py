"""components.journal — Structured trail journal.

A ring-buffer that records what happened on each day: actions taken,
random events and the final verdict.  The trail scene shows the tail of
it; tests read it to check what the dispatcher did.

Usage:
    state.journal.record(state.supplies.day, "event", "disease",
                         details={"applied": True})

Categories in use: ``action``, ``event``, ``status``.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class JournalEntry:
    day: int
    cat: str
    msg: str
    details: dict | None = None

    def __str__(self) -> str:
        return f"Day {self.day}: {self.cat} {self.msg}"


@dataclass
class Journal:
    """Ring-buffer of per-day trail records, oldest first."""

    entries: list[JournalEntry] = field(default_factory=list)
    max_entries: int = 200

    def record(self, day: int, cat: str, msg: str, *,
               details: dict | None = None) -> JournalEntry:
        entry = JournalEntry(day, cat, msg, details)
        self.entries.append(entry)
        overflow = len(self.entries) - self.max_entries
        if overflow > 0:
            del self.entries[:overflow]
        return entry

    def clear(self):
        self.entries.clear()

    def recent(self, n: int = 10) -> list[JournalEntry]:
        """The *n* most recent entries, newest last."""
        return self.entries[-n:] if n > 0 else []

    def for_day(self, day: int) -> list[JournalEntry]:
        return [e for e in self.entries if e.day == day]

    def for_cat(self, cat: str, n: int = 50) -> list[JournalEntry]:
        """Last *n* entries in category *cat*."""
        return [e for e in self.entries if e.cat == cat][-n:]
