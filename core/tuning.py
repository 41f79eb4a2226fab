"""core/tuning.py — Data-driven tuning values.

The starting supplies, party roster, window size and RNG seed live in
``data/tuning.toml`` and are loaded once at startup.  Any module can
read a value with::

    from core.tuning import get
    food = get("start", "food", 500)

Missing keys (or a missing file) fall back to the caller's default, so
the game always runs with the stock rules.  ``reload()`` re-reads the
same file.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path | None = None


def load(path: str | Path | None = None) -> None:
    """Load (or reload) tuning values from *path* (default ``data/tuning.toml``).

    A missing or malformed file leaves every value at its default.
    """
    global _data, _path
    _path = Path(path) if path is not None else DEFAULT_PATH
    _data = {}

    if not _path.exists():
        print(f"[TUNING] {_path} not found, using defaults")
        return

    try:
        with open(_path, "rb") as f:
            _data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        print(f"[TUNING] {_path} is not valid TOML ({exc}), using defaults")
        return

    print(f"[TUNING] Loaded {_count_leaves(_data)} values from {_path}")


def reload() -> None:
    """Re-read the tuning file from disk."""
    load(_path)


def clear() -> None:
    """Forget every loaded value (tests use this to start clean)."""
    global _data, _path
    _data = {}
    _path = None


def _table(section_path: str) -> dict | None:
    """Walk dot-separated *section_path*; None if any step is missing."""
    node = _data
    for part in section_path.split("."):
        node = node.get(part) if isinstance(node, dict) else None
        if node is None:
            return None
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read a tuning value.

    >>> get("start", "oxen", 2)
    2
    """
    table = _table(section)
    if table is None:
        return default
    return table.get(key, default)


def section(section_path: str) -> dict:
    """Return an entire section dict (shallow copy), or empty dict."""
    return dict(_table(section_path) or {})


def _count_leaves(d: dict) -> int:
    return sum(_count_leaves(v) if isinstance(v, dict) else 1
               for v in d.values())
