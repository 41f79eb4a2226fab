"""
scenes/trail_scene.py — The wagon trail view

Top strip: the wagon on the trail, scenery tinted by distance.
Below: supplies bar, scene text with this turn's messages, choice
buttons, party health, and the tail of the trail journal.

Click a button or press its number key to choose.  Escape quits.
After the journey ends, Enter starts a new one.

The scene owns the ``GameState`` and the RNG but never applies rules
itself: every choice goes through ``simulation.actions.dispatch``.
"""

from __future__ import annotations
import pygame

from core.app import App
from core.constants import CANVAS_HEIGHT
from core.scene import Scene
from components import StartConfig
from simulation.actions import Status, dispatch
from simulation.scene_graph import is_terminal
from simulation.snapshot import Snapshot, take_snapshot
from simulation.state import GameState, new_game
from scenes.trail_draw import draw_landscape, draw_log, draw_party, draw_stats_bar
from ui.helpers import BUTTON_H, TEXT, draw_button, draw_panel
from ui.messages import TurnText, turn_text


_STATUS_COLORS = {
    Status.ONGOING: (200, 200, 140),
    Status.WON: (120, 230, 120),
    Status.LOST: (240, 110, 100),
}


class TrailScene(Scene):
    def __init__(self, state: GameState, rng, config: StartConfig | None = None,
                 journal_size: int = 200):
        self.state = state
        self.rng = rng
        self.config = config
        self.journal_size = journal_size

        self.snapshot: Snapshot = take_snapshot(state)
        self.text: TurnText = turn_text(self.snapshot)

        # Hit-test rects from the last draw, index-aligned with choices
        self._button_rects: list[pygame.Rect] = []
        self._hovered: int | None = None

    # ── Turn handling ────────────────────────────────────────────────

    def choose(self, index: int) -> None:
        """Dispatch the *index*-th visible choice (0-based)."""
        choices = self.snapshot.choices
        if not 0 <= index < len(choices):
            return
        result = dispatch(choices[index].action, self.state, self.rng)
        self.snapshot = take_snapshot(self.state, result)
        self.text = turn_text(self.snapshot)

    def restart(self) -> None:
        self.state = new_game(self.config, self.journal_size)
        self.snapshot = take_snapshot(self.state)
        self.text = turn_text(self.snapshot)
        print("[TRAIL] New journey started")

    # ── Scene interface ──────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                app.quit()
            elif event.key == pygame.K_RETURN and is_terminal(self.state.scene):
                self.restart()
            elif pygame.K_1 <= event.key <= pygame.K_9:
                self.choose(event.key - pygame.K_1)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, rect in enumerate(self._button_rects):
                if rect.collidepoint(event.pos):
                    self.choose(i)
                    break

    def update(self, dt: float, app: App):
        pos = app.mouse_pos()
        self._hovered = None
        for i, rect in enumerate(self._button_rects):
            if rect.collidepoint(pos):
                self._hovered = i
                break

    def draw(self, surface: pygame.Surface, app: App):
        surface.fill((16, 20, 24))
        sw, sh = surface.get_size()
        snap = self.snapshot

        draw_landscape(surface, pygame.Rect(0, 0, sw, CANVAS_HEIGHT), snap)
        draw_stats_bar(surface, app, pygame.Rect(0, CANVAS_HEIGHT, sw, 34), snap)

        top = CANVAS_HEIGHT + 40
        left_w = int(sw * 0.62)
        right_x = left_w + 6
        right_w = sw - right_x - 6

        # ── Scene text + this turn's messages ────────────────────────
        story = pygame.Rect(6, top, left_w - 6, sh - top - 40)
        draw_panel(surface, story)
        y = app.draw_lines(surface, self.text.scene_text, story.x + 10,
                           story.y + 8, story.w - 20, TEXT, app.font)
        for line in self.text.event_messages:
            y = app.draw_lines(surface, line, story.x + 10, y + 2,
                               story.w - 20, (210, 190, 140), app.font_sm)

        # ── Choices ──────────────────────────────────────────────────
        self._button_rects = []
        by = max(y + 10, story.bottom - len(snap.choices) * (BUTTON_H + 6) - 4)
        for i, choice in enumerate(snap.choices):
            rect = draw_button(surface, app, story.x + 10, by, story.w - 20,
                               choice.label, hotkey=i + 1,
                               hovered=(i == self._hovered))
            self._button_rects.append(rect)
            by += BUTTON_H + 6

        # ── Party + journal ──────────────────────────────────────────
        party_h = 8 + len(snap.party) * 34
        draw_party(surface, app, pygame.Rect(right_x, top, right_w, party_h), snap)
        journal = [str(e) for e in self.state.journal.recent(20)]
        log_top = top + party_h + 6
        draw_log(surface, app,
                 pygame.Rect(right_x, log_top, right_w, sh - log_top - 40),
                 journal)

        # ── Status line ──────────────────────────────────────────────
        rect = app.draw_text(surface, self.text.status_message, 12, sh - 30,
                             _STATUS_COLORS[snap.status], app.font_lg)
        if snap.status is not Status.ONGOING:
            app.draw_text(surface, "Enter = new journey   Esc = quit",
                          rect.right + 16, sh - 26, (150, 160, 165), app.font_sm)
