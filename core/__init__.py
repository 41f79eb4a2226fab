"""core — App shell, rule constants, outcome types and tuning.

Nothing in here knows about the trail rules themselves; ``simulation``
builds on these pieces and ``scenes`` draws the result.
"""

__all__ = ["app", "constants", "events", "scene", "tuning"]
