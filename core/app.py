"""
core/app.py — Pygame application shell

Owns the window, the frame loop and the scene stack.  Game rules never
live here; scenes hold the ``GameState`` and draw it.

    app = App(title="Wagon Trail", width=960, height=640)
    app.push_scene(TrailScene(state, rng))
    app.run()

Scenes always draw onto a fixed-size virtual surface which is scaled to
whatever size the window has been dragged to.
"""

from __future__ import annotations
import pygame
from core.scene import Scene


class App:
    def __init__(self, title: str = "Wagon Trail", width: int = 960,
                 height: int = 640, fps: int = 30):
        pygame.init()
        pygame.display.set_caption(title)
        self.virtual_size = (width, height)
        self.canvas = pygame.Surface(self.virtual_size)
        self.screen = pygame.display.set_mode(self.virtual_size, pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.dt = 0.0
        self.running = True

        self._stack: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 15)
        self.font_sm = pygame.font.SysFont("monospace", 12)
        self.font_lg = pygame.font.SysFont("monospace", 20, bold=True)

    # -- Scene stack --

    @property
    def scene(self) -> Scene | None:
        return self._stack[-1] if self._stack else None

    def push_scene(self, scene: Scene):
        if self.scene:
            self.scene.on_exit(self)
        self._stack.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        """Drop the top scene.  Popping the last one ends the run."""
        if self._stack:
            self._stack.pop().on_exit(self)
        if self.scene:
            self.scene.on_enter(self)
        else:
            self.running = False

    def quit(self):
        self.running = False

    # -- Window ↔ virtual coordinates --

    def to_virtual(self, pos: tuple[int, int]) -> tuple[int, int]:
        sw, sh = self.screen.get_size()
        vw, vh = self.virtual_size
        return int(pos[0] * vw / sw), int(pos[1] * vh / sh)

    def mouse_pos(self) -> tuple[int, int]:
        return self.to_virtual(pygame.mouse.get_pos())

    # -- Main loop --

    def run(self):
        while self.running:
            self.dt = self.clock.tick(self.fps) / 1000.0
            for event in pygame.event.get():
                self._handle(event)
            if self.scene:
                self.scene.update(self.dt, self)
                self.scene.draw(self.canvas, self)
            pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
            pygame.display.flip()
        pygame.quit()

    def _handle(self, event: pygame.event.Event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.screen = pygame.display.set_mode((event.w, event.h),
                                                  pygame.RESIZABLE)
        elif self.scene:
            if event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                event = pygame.event.Event(event.type, button=event.button,
                                           pos=self.to_virtual(event.pos))
            self.scene.handle_event(event, self)

    # -- Text --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        img = (font or self.font).render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_lines(self, surface: pygame.Surface, text: str, x: int, y: int,
                   width: int, color=(255, 255, 255), font=None,
                   spacing: int = 2) -> int:
        """Draw *text* word-wrapped to *width* px, honouring newlines.

        Returns the y coordinate just below the last line.
        """
        f = font or self.font
        line_h = f.get_linesize() + spacing
        for paragraph in text.split("\n"):
            line = ""
            for word in paragraph.split(" "):
                trial = f"{line} {word}" if line else word
                if line and f.size(trial)[0] > width:
                    self.draw_text(surface, line, x, y, color, f)
                    y += line_h
                    line = word
                else:
                    line = trial
            self.draw_text(surface, line, x, y, color, f)
            y += line_h
        return y
