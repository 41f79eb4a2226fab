"""ui — Presentation helpers for the trail view.

``ui.messages`` turns simulation outcomes into player-facing text and is
importable without pygame.  ``ui.helpers`` holds the pygame drawing
primitives (panels, health bars, choice buttons).
"""

from ui.messages import TurnText, describe, status_message, turn_text

__all__ = ["TurnText", "describe", "status_message", "turn_text"]
