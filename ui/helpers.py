"""ui.helpers — Shared drawing utilities for the trail view panels."""

from __future__ import annotations
import pygame

from core.constants import HEALTH_FAIR, HEALTH_GOOD, MAX_HEALTH


PANEL_BG = (24, 30, 36)
PANEL_BORDER = (70, 80, 90)
TEXT = (225, 225, 225)
TEXT_DIM = (150, 160, 165)


def health_color(health: int) -> tuple[int, int, int]:
    """Green above 50, orange above 20, red otherwise."""
    if health > HEALTH_GOOD:
        return (40, 160, 40)
    if health > HEALTH_FAIR:
        return (230, 140, 20)
    return (200, 30, 30)


def draw_panel(surface: pygame.Surface, rect: pygame.Rect,
               bg=PANEL_BG, border=PANEL_BORDER) -> None:
    pygame.draw.rect(surface, bg, rect)
    pygame.draw.rect(surface, border, rect, 1)


def draw_health_bar(surface: pygame.Surface, app,
                    x: int, y: int, w: int,
                    name: str, health: int) -> int:
    """Label plus a filled bar.  Returns the y just below the bar."""
    app.draw_text(surface, f"{name} HP: {health}%", x, y, TEXT, font=app.font_sm)
    bar_y = y + app.font_sm.get_linesize() + 2
    pygame.draw.rect(surface, (60, 60, 60), (x, bar_y, w, 8))
    fill = int(w * max(0, min(MAX_HEALTH, health)) / MAX_HEALTH)
    if fill > 0:
        pygame.draw.rect(surface, health_color(health), (x, bar_y, fill, 8))
    return bar_y + 14


# ── choice buttons ─────────────────────────────────────────────────

BUTTON_H = 32


def draw_button(surface: pygame.Surface, app,
                x: int, y: int, w: int, label: str,
                *, hotkey: int | None = None,
                hovered: bool = False) -> pygame.Rect:
    """Draw one choice button.  Returns its ``Rect`` for hit-testing."""
    rect = pygame.Rect(x, y, w, BUTTON_H)
    bg = (70, 90, 70) if hovered else (50, 62, 50)
    pygame.draw.rect(surface, bg, rect, border_radius=4)
    pygame.draw.rect(surface, (120, 150, 120), rect, 1, border_radius=4)
    text = f"[{hotkey}] {label}" if hotkey is not None else label
    app.draw_text(surface, text, x + 10, y + 8, TEXT, font=app.font)
    return rect
