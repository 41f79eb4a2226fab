"""
core/scene.py — Screen interface for the app's scene stack

A screen that the ``App`` can push.  Only the screen on top of the
stack sees input, ticks and draw calls.

Not to be confused with the trail's narrative scenes
(``simulation.scene_graph.SceneId``): those are game state, these are
screens.  The whole journey runs inside a single ``TrailScene``, so
most hooks below stay no-ops for it.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Pushed, or uncovered by a pop."""

    def on_exit(self, app: App):
        """Popped, or covered by a push."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """One pygame event; mouse positions are already in virtual coords."""

    def update(self, dt: float, app: App):
        """Once per frame, *dt* in seconds."""

    def draw(self, surface: pygame.Surface, app: App):
        """Paint onto the fixed-size virtual surface."""
