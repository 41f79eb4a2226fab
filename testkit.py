"""testkit.py — Shared helpers for the root-level test modules.

``ScriptedRng`` plays back queued rolls so a test can force exactly
which random event fires, how much food a hunt brings in, and who gets
sick.  Asking for a roll that wasn't scripted raises ``IndexError``,
which doubles as a check that a refused action consumed no randomness.

``run_tests`` lets every test module run as a plain script:

    Run:  python test_actions.py
"""
from __future__ import annotations
import sys, traceback


# Pre-scaled fractions: r = fraction * total odds (0.55) lands in each band
NO_EVENT = 0.9          # first roll >= 0.35 → nothing happens
EVENT = 0.1             # first roll <  0.35 → an event fires
DISEASE = 0.1           # r = 0.055
OXEN_LOSS = 0.3         # r = 0.165
GOOD_WEATHER = 0.5      # r = 0.275
BAD_LUCK = 0.8          # r = 0.44
WAGON_BREAK = 0.95      # r = 0.5225

NO_INJURY = 0.5
INJURY = 0.05


class ScriptedRng:
    """Stand-in for ``random.Random`` that returns queued values."""

    def __init__(self, randoms=(), ints=(), picks=()):
        self.randoms = list(randoms)
        self.ints = list(ints)
        self.picks = list(picks)

    def random(self) -> float:
        return self.randoms.pop(0)

    def randint(self, a: int, b: int) -> int:
        value = self.ints.pop(0)
        assert a <= value <= b, f"scripted randint {value} outside [{a}, {b}]"
        return value

    def choice(self, seq):
        index = self.picks.pop(0) if self.picks else 0
        return seq[index]

    def exhausted(self) -> bool:
        return not (self.randoms or self.ints or self.picks)


def event_rolls(kind_fraction: float) -> list[float]:
    """The two ``random()`` rolls that force one specific event."""
    return [EVENT, kind_fraction]


# ── Script runner ────────────────────────────────────────────────────

def run_tests(namespace: dict, title: str) -> None:
    """Run every ``test_*`` callable in *namespace* and exit non-zero on failure."""
    passed = failed = 0
    for name, fn in list(namespace.items()):
        if not name.startswith("test_") or not callable(fn):
            continue
        try:
            fn()
        except Exception:
            failed += 1
            print(f"  [FAIL] {name}")
            for line in traceback.format_exc().strip().splitlines():
                print(f"         {line}")
        else:
            passed += 1
            print(f"  [PASS] {name}")

    print(f"\n{'=' * 60}")
    print(f"  {title}: {passed} passed, {failed} failed  (total {passed + failed})")
    print(f"{'=' * 60}")
    sys.exit(1 if failed else 0)
