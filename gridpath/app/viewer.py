#!/usr/bin/env python3
"""
Shortest Path Visualizer: Dijkstra vs A* on an editable grid

- Mouse (left button on the grid):
    Start tool   -> place start
    End tool     -> place end
    Wall tool    -> click / drag to toggle walls
- Keyboard:
    [D]/[A]      -> run Dijkstra / A*
    [S]/[E]/[W]  -> tool: start / end / wall
    [R]          -> reset grid (keep walls)
    [C]          -> clear all
    [+]/[-]      -> animation speed
    [Q]/[ESC]    -> quit

Settings:
- ENV: GRIDPATH_CELL_SIZE, GRIDPATH_STEP_MS, GRIDPATH_LOG_LEVEL
- CLI: --cell-size=N, --step-ms=N, --log-level=NAME
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# -------------------------------------------------------------------------------

from typing import Optional, Sequence
import pygame
from loguru import logger

from gridpath.app import theme_skin as THEME
from gridpath.app.toasts import ToastNotifier
from gridpath.config import Settings, configure_logging, resolve_settings
from gridpath.core.session import Session

# ---------- Config ----------
PANEL_W = 320            # right band: stats + buttons + legend
GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = THEME.TEXT_LIGHT
TEXT_DIM    = (140,146,158)
ACCENT_GOLD = THEME.ACCENT_GOLD

# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False   # highlight state
        self.enabled = True

    def set_active(self, value: bool):
        self.active = bool(value)

    def set_enabled(self, value: bool):
        self.enabled = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle     = (36, 40, 48, 220)
        bg_hover    = (46, 50, 60, 230)
        bg_active   = (58, 86, 160, 235)  # bluish active
        bg_disabled = (30, 32, 38, 160)
        border_active = (120, 170, 255, 255)

        if not self.enabled:
            bg = bg_disabled
        elif self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)

        # subtle highlight top band
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))

        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        color = (235,238,242) if self.enabled else TEXT_DIM
        text = font.render(self.label, True, color)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False

# ---------- Viewer ----------
class Viewer:
    def __init__(self, settings: Settings):
        pygame.init()

        self.settings = settings
        self.toasts = ToastNotifier()
        self.session = Session(notifier=self.toasts,
                               cell_size=settings.cell_size,
                               visit_delay_ms=settings.step_ms,
                               path_delay_ms=settings.path_step_ms)
        self.cell_size = settings.cell_size
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 24)

        grid = self.session.grid
        grid_px_w = GRID_MARGIN*2 + grid.width  * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.height * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 760)

        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Shortest Path Visualizer: Dijkstra vs A*")

        self._buttons: list[UIButton] = []
        self.clock = pygame.time.Clock()
        self._layout(win_w, win_h)

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        grid = self.session.grid
        grid_plate_w = grid.width  * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = grid.height * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right), win_h)
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            self.session.update(self.clock.tick(60))
            self._refresh_active_states()
            self._draw()

    def _quit(self):
        logger.info("Bye")
        pygame.quit(); sys.exit(0)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                hit = False
                for b in self._buttons:
                    hit = b.handle_mouse(e) or hit
                if not hit:
                    self.session.pointer_down(*self._to_grid_px(e.pos))
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if e.buttons[0]:
                    self.session.pointer_move(*self._to_grid_px(e.pos))
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self.session.pointer_up()
            elif e.type == pygame.WINDOWLEAVE:
                self.session.pointer_up()

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._quit()
        elif key == pygame.K_d:
            self.session.run_dijkstra()
        elif key == pygame.K_a:
            self.session.run_astar()
        elif key == pygame.K_s:
            self.session.select_tool("start")
        elif key == pygame.K_e:
            self.session.select_tool("end")
        elif key == pygame.K_w:
            self.session.select_tool("wall")
        elif key == pygame.K_r:
            self.session.reset_grid()
        elif key == pygame.K_c:
            self.session.clear_all()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self._bump_speed(-2)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
            self._bump_speed(+2)

    def _to_grid_px(self, pos):
        ox, oy = self._grid_origin
        return pos[0] - ox, pos[1] - oy

    def _bump_speed(self, dv: int):
        """Smaller delay = faster. Takes effect on the next run."""
        s = self.session
        s.visit_delay_ms = int(max(0, min(200, s.visit_delay_ms + dv)))
        s.path_delay_ms = s.visit_delay_ms * 2

    # ---------- drawing ----------
    def _draw(self):
        THEME.draw_backdrop(self.screen)
        THEME.paint(self.screen, self.session.grid, self.cell_size, self._grid_origin)
        THEME.glass_panel(self.screen, self._right_band.inflate(-12, -12))
        self._draw_metrics_and_buttons()
        THEME.draw_toasts(self.screen, self.font_small, self.toasts.active(), self._right_band)
        pygame.display.flip()

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 170  # leaves space for the stats card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None):
            rect = pygame.Rect(x, y, w, h)
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run Dijkstra", self.session.run_dijkstra, store_as="btn_run_d"); y += h + gap
        add("Run A*",       self.session.run_astar,    store_as="btn_run_a"); y += h + gap + 6

        add("Place Start Node", lambda: self.session.select_tool("start"), togglable=True, store_as="btn_tool_s"); y += h + gap
        add("Place End Node",   lambda: self.session.select_tool("end"),   togglable=True, store_as="btn_tool_e"); y += h + gap
        add("Draw Walls",       lambda: self.session.select_tool("wall"),  togglable=True, store_as="btn_tool_w"); y += h + gap + 6

        add("Reset Grid", self.session.reset_grid, store_as="btn_reset"); y += h + gap
        add("Clear All",  self.session.clear_all,  store_as="btn_clear"); y += h + gap

        self._legend_y = y + 10
        self._refresh_active_states()

    def _refresh_active_states(self):
        busy = self.session.busy
        for name in ("btn_run_d", "btn_run_a", "btn_reset", "btn_clear"):
            if hasattr(self, name):
                getattr(self, name).set_enabled(not busy)

        tool = self.session.tool
        if hasattr(self, "btn_tool_s"):
            self.btn_tool_s.set_active(tool == "start")
        if hasattr(self, "btn_tool_e"):
            self.btn_tool_e.set_active(tool == "end")
        if hasattr(self, "btn_tool_w"):
            self.btn_tool_w.set_active(tool == "wall")

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        # ---- STATS CARD (top) ----
        card_h = 150
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        s = self.session
        line("Statistics", big=True, color=ACCENT_GOLD)
        line(f"Algorithm: {s.stats.algorithm}")
        line(f"Nodes Explored: {s.stats.nodes_explored}")
        line(f"Path Length: {s.stats.path_length}")
        if s.busy and s.sequencer is not None:
            line(f"Animating… {int(s.sequencer.progress * 100)}%")
        else:
            line(f"Idle  ·  {s.visit_delay_ms} ms/step", color=TEXT_DIM)

        for b in self._buttons:
            b.draw(self.screen, self.font)

        THEME.draw_legend(self.screen, self.font_small, rb.x + 20, self._legend_y)

# ---------- main ----------
def main(argv: Optional[Sequence[str]] = None):
    try:
        settings = resolve_settings(argv)
    except ValueError as ex:
        print(f"Invalid settings: {ex}")
        sys.exit(2)
    configure_logging(settings.log_level)
    logger.info(f"Starting viewer: cell_size={settings.cell_size} step_ms={settings.step_ms}")
    Viewer(settings).run()

if __name__ == "__main__":
    main()
