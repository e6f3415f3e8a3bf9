"""
Interactive Pygame Viewer for the Game of Life Universe

Draws the universe's read-only cell buffer as a block grid and drives
the run/pause loop. The HUD shows generation, population, grid size
and the wall-clock cost of the last step.

Controls:
  SPACE       Pause / Resume
  N           Single step (while paused)
  R           Reseed with random cells
  C           Clear the grid
  H           Toggle HUD overlay
  Q / ESC     Quit
"""

import numpy as np
import pygame


ALIVE_COLOR = (235, 240, 250)
DEAD_COLOR = (12, 14, 20)
GRID_COLOR = (30, 33, 42)


class Viewer:

    def __init__(self, universe, width=600, height=600, steps_per_second=10):
        self.universe = universe
        self.canvas_w = width
        self.canvas_h = height
        self.steps_per_second = steps_per_second

        self.running = True
        self.paused = False
        self.show_hud = True
        self.hud_font = None

    def render(self):
        """Convert the current generation to a (height, width, 3) uint8 image."""
        alive = self.universe.grid().astype(bool)
        rgb = np.empty(alive.shape + (3,), dtype=np.uint8)
        rgb[alive] = ALIVE_COLOR
        rgb[~alive] = DEAD_COLOR
        return rgb

    def hud_line(self):
        stats = self.universe.stats
        line = (f"{self.universe.engine_label}  |  Gen: {stats['generation']:,}  |  "
                f"Alive: {stats['alive_pct']:.1f}%  |  "
                f"{self.universe.width}x{self.universe.height}  |  "
                f"Step: {stats['last_step_ms']:.3f} ms")
        if self.paused:
            line = "[PAUSED]  " + line
        return line

    def _draw_grid(self, screen):
        rgb = self.render()
        surface = pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())
        # Nearest-neighbor scale keeps cells as crisp blocks
        scaled = pygame.transform.scale(surface, (self.canvas_w, self.canvas_h))
        screen.blit(scaled, (0, 0))

        cell_w = self.canvas_w / self.universe.width
        cell_h = self.canvas_h / self.universe.height
        if cell_w >= 6 and cell_h >= 6:
            for c in range(1, self.universe.width):
                x = int(c * cell_w)
                pygame.draw.line(screen, GRID_COLOR, (x, 0), (x, self.canvas_h))
            for r in range(1, self.universe.height):
                y = int(r * cell_h)
                pygame.draw.line(screen, GRID_COLOR, (0, y), (self.canvas_w, y))

    def _draw_hud(self, screen):
        if not self.show_hud:
            return

        padding = 6
        bg_height = 24
        bg_surface = pygame.Surface((self.canvas_w, bg_height), pygame.SRCALPHA)
        bg_surface.fill((0, 0, 0, 140))
        screen.blit(bg_surface, (0, 0))

        text_surface = self.hud_font.render(self.hud_line(), True, (210, 215, 225))
        screen.blit(text_surface, (padding + 4, padding))

    def run(self):
        """Main viewer loop."""
        pygame.init()

        screen = pygame.display.set_mode((self.canvas_w, self.canvas_h))
        pygame.display.set_caption("Game of Life")
        clock = pygame.time.Clock()
        self.hud_font = pygame.font.SysFont("menlo", 13)

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            if not self.paused:
                self.universe.step()

            screen.fill(DEAD_COLOR)
            self._draw_grid(screen)
            self._draw_hud(screen)

            pygame.display.flip()
            clock.tick(self.steps_per_second)

        pygame.quit()

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_n:
            if self.paused:
                ms = self.universe.step()
                print(f"[Life] Gen {self.universe.generation}: {ms:.3f} ms")

        elif key == pygame.K_r:
            self.universe.seed()
            print("[Life] Reseeded")

        elif key == pygame.K_c:
            self.universe.clear()
            print("[Life] Cleared")

        elif key == pygame.K_h:
            self.show_hud = not self.show_hud
