"""scenes/trail_draw.py — Rendering helpers for the trail scene.

All pure-draw functions live here so that TrailScene.draw() stays thin.
Every function receives the data it needs as parameters; the live
``GameState`` never reaches this module, only a ``Snapshot``.
"""

from __future__ import annotations
import pygame

from core.app import App
from core.constants import (
    GROUND_COLOR, NIGHT_COLOR, OX_COLOR, SCENERY_COLORS, SKY_COLOR, TILE_SIZE,
    WAGON_BODY_COLOR, WAGON_COVER_COLOR, WAGON_INNER_COLOR, WHEEL_COLOR,
)
from simulation.scene_graph import SceneId
from simulation.snapshot import Snapshot
from ui.helpers import TEXT, TEXT_DIM, draw_health_bar, draw_panel


def scenery_color(distance: int) -> tuple[int, int, int]:
    """Mountain colour for the stretch of trail the party is on."""
    for threshold, color in SCENERY_COLORS:
        if distance > threshold:
            return color
    return SCENERY_COLORS[-1][1]


# ── Wagon ───────────────────────────────────────────────────────────

def draw_wagon(surface: pygame.Surface, x: int, y: int, oxen: int) -> None:
    # Wheels
    pygame.draw.rect(surface, WHEEL_COLOR, (x - 5, y + TILE_SIZE * 2 - 5, 10, 10))
    pygame.draw.rect(surface, WHEEL_COLOR, (x + 95, y + TILE_SIZE * 2 - 5, 10, 10))

    # Body
    pygame.draw.rect(surface, WAGON_BODY_COLOR, (x, y + TILE_SIZE, 100, TILE_SIZE + 5))
    pygame.draw.rect(surface, WAGON_INNER_COLOR, (x + 5, y + TILE_SIZE + 5, 90, TILE_SIZE - 5))

    # Cover and hoops
    pygame.draw.rect(surface, WAGON_COVER_COLOR, (x + 10, y, 5, TILE_SIZE + 10))
    pygame.draw.rect(surface, WAGON_COVER_COLOR, (x + 85, y, 5, TILE_SIZE + 10))
    pygame.draw.rect(surface, WAGON_COVER_COLOR, (x + 10, y, 75, TILE_SIZE))

    # One block per ox still in harness (the team has room for two)
    for i in range(min(oxen, 2)):
        pygame.draw.rect(surface, OX_COLOR, (x + 105 + i * 25, y + TILE_SIZE * 2, 20, 10))


# ── Landscape ───────────────────────────────────────────────────────

def draw_landscape(surface: pygame.Surface, area: pygame.Rect,
                   snap: Snapshot) -> None:
    """Sky, ground, wagon and a mountain coloured by distance travelled."""
    prev_clip = surface.get_clip()
    surface.set_clip(area)

    pygame.draw.rect(surface, NIGHT_COLOR, area)
    pygame.draw.rect(surface, SKY_COLOR,
                     (area.x, area.y, area.w, area.h // 2))
    ground_top = area.bottom - TILE_SIZE * 2
    pygame.draw.rect(surface, GROUND_COLOR,
                     (area.x, ground_top, area.w, TILE_SIZE * 2))

    wagon_x = area.x + area.w // 2 - 60
    wagon_y = area.bottom - TILE_SIZE * 3
    draw_wagon(surface, wagon_x, wagon_y, snap.oxen)

    right = area.right
    pygame.draw.polygon(surface, scenery_color(snap.distance), [
        (right - 150, ground_top),
        (right - 100, area.bottom - TILE_SIZE * 6),
        (right - 50, ground_top),
    ])

    if snap.scene_id == SceneId.BROKEN_WAGON:
        # Loose wheel lying beside the wagon
        pygame.draw.circle(surface, WHEEL_COLOR,
                           (wagon_x - 30, area.bottom - TILE_SIZE - 6), 9, 3)

    surface.set_clip(prev_clip)


# ── HUD ─────────────────────────────────────────────────────────────

def draw_stats_bar(surface: pygame.Surface, app: App,
                   area: pygame.Rect, snap: Snapshot) -> None:
    draw_panel(surface, area)
    stats = (f"Day: {snap.day}   Distance: {snap.distance}/{snap.destination} mi"
             f"   Food: {snap.food} lbs   Oxen: {snap.oxen}"
             f"   Parts: {snap.wagon_parts}")
    app.draw_text(surface, stats, area.x + 10, area.y + 8, TEXT, font=app.font)


def draw_party(surface: pygame.Surface, app: App,
               area: pygame.Rect, snap: Snapshot) -> None:
    draw_panel(surface, area)
    x, y = area.x + 10, area.y + 8
    if snap.scene_id == SceneId.INITIAL:
        app.draw_text(surface, "Party members ready.", x, y, TEXT_DIM, font=app.font)
        return
    for member in snap.party:
        y = draw_health_bar(surface, app, x, y, area.w - 20,
                            member.name, member.health)


def draw_log(surface: pygame.Surface, app: App, area: pygame.Rect,
             lines: list[str]) -> None:
    """Tail of the journal, newest last."""
    draw_panel(surface, area)
    y = area.y + 6
    line_h = app.font_sm.get_linesize()
    visible = max(1, (area.h - 12) // line_h)
    for line in lines[-visible:]:
        app.draw_text(surface, line, area.x + 8, y, TEXT_DIM, font=app.font_sm)
        y += line_h
