"""
Flat light skin: cell colours, gridlines, panel underlay, toast pills.

- Grid: one solid colour per cell by precedence
  (start > end > path > visited > wall > empty), thin light gridlines
- Right panel: frosted glass underlay only (viewer draws buttons/metrics on top)
- Toasts: rounded pills stacked at the bottom of the panel

paint() redraws the whole grid area on every call, so whatever was on the
surface before never shows through.
"""

from __future__ import annotations
from typing import Iterable, Tuple
import pygame

from gridpath.core.grid import Grid
from gridpath.core.types import Cell

# ---- palette ----
EMPTY_WHITE   = pygame.Color("#FFFFFF")
START_CYAN    = pygame.Color("#06B6D4")
END_MAGENTA   = pygame.Color("#C026D3")
PATH_YELLOW   = pygame.Color("#EAB308")
VISITED_CORAL = pygame.Color("#FB923C")
WALL_SLATE    = pygame.Color("#334155")
GRIDLINE      = pygame.Color("#E2E8F0")

TEXT_LIGHT    = (230, 235, 240)
ACCENT_GOLD   = (255, 210, 0)

# panel colors
PANEL_FILL    = (18, 20, 28, 190)
PANEL_SHADOW  = (0, 0, 0, 140)

# toast pill colors
TOAST_ERROR   = (153, 27, 27, 230)
TOAST_SUCCESS = (22, 101, 52, 230)

LEGEND = (
    ("Start Node", START_CYAN),
    ("End Node",   END_MAGENTA),
    ("Wall",       WALL_SLATE),
    ("Visited",    VISITED_CORAL),
    ("Final Path", PATH_YELLOW),
)

# ---------- cells ----------
def cell_color(cell: Cell) -> pygame.Color:
    if cell.is_start:   return START_CYAN
    if cell.is_end:     return END_MAGENTA
    if cell.is_path:    return PATH_YELLOW
    if cell.is_visited: return VISITED_CORAL
    if cell.is_wall:    return WALL_SLATE
    return EMPTY_WHITE

def paint(screen: pygame.Surface, grid: Grid, cell_size: int,
          origin: Tuple[int, int] = (0, 0)) -> None:
    """Draw every cell of `grid` plus gridlines with the top-left corner at `origin`."""
    cs = cell_size
    ox, oy = origin
    screen.fill(EMPTY_WHITE, pygame.Rect(ox, oy, grid.width * cs, grid.height * cs))

    for row in grid.cells:
        for cell in row:
            rect = pygame.Rect(ox + cell.x*cs, oy + cell.y*cs, cs, cs)
            color = cell_color(cell)
            if color != EMPTY_WHITE:
                pygame.draw.rect(screen, color, rect)
            pygame.draw.rect(screen, GRIDLINE, rect, 1)

# ---------- helpers ----------
def _rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color, radius=16, width=0):
    pygame.draw.rect(surface, color, rect, width=width, border_radius=radius)

def glass_panel(screen: pygame.Surface, rect: pygame.Rect,
                fill_rgba=PANEL_FILL, shadow_rgba=PANEL_SHADOW):
    if rect.width <= 0 or rect.height <= 0:
        return
    shadow = pygame.Surface((rect.width + 18, rect.height + 18), pygame.SRCALPHA)
    _rounded_rect(shadow, pygame.Rect(9, 9, rect.width, rect.height), shadow_rgba, radius=20)
    screen.blit(shadow, (rect.x - 9, rect.y - 9))
    card = pygame.Surface(rect.size, pygame.SRCALPHA)
    _rounded_rect(card, pygame.Rect(0, 0, rect.width, rect.height), fill_rgba, radius=20)
    # subtle top sheen
    hi = pygame.Surface((rect.width, max(18, rect.height // 12)), pygame.SRCALPHA)
    pygame.draw.rect(hi, (255,255,255,18), hi.get_rect(), border_radius=18)
    card.blit(hi, (0,0))
    screen.blit(card, rect.topleft)

def draw_backdrop(screen: pygame.Surface):
    """Dark vertical gradient behind everything."""
    w, h = screen.get_size()
    top = (24, 26, 32); bot = (36, 40, 48)
    for y in range(h):
        t = y / max(1, h-1)
        c = (
            int(top[0] + (bot[0]-top[0]) * t),
            int(top[1] + (bot[1]-top[1]) * t),
            int(top[2] + (bot[2]-top[2]) * t),
        )
        pygame.draw.line(screen, c, (0, y), (w, y))

def draw_legend(screen: pygame.Surface, font: pygame.font.Font, x: int, y: int) -> int:
    """Colour swatches with labels; returns the y below the last row."""
    for label, color in LEGEND:
        sw = pygame.Rect(x, y + 2, 14, 14)
        _rounded_rect(screen, sw, color, radius=3)
        txt = font.render(label, True, TEXT_LIGHT)
        screen.blit(txt, (x + 22, y))
        y += max(18, txt.get_height()) + 4
    return y

def draw_toasts(screen: pygame.Surface, font: pygame.font.Font, toasts: Iterable,
                rect: pygame.Rect) -> None:
    """Stack toast pills upwards from the bottom of `rect`, newest at the bottom."""
    pad_x, pad_y = 12, 6
    y = rect.bottom - 12
    for toast in reversed(list(toasts)):
        surf = font.render(toast.message, True, TEXT_LIGHT)
        w = min(rect.width - 32, surf.get_width() + pad_x*2)
        h = surf.get_height() + pad_y*2
        y -= h
        pill = pygame.Surface((w, h), pygame.SRCALPHA)
        fill = TOAST_ERROR if toast.kind == "error" else TOAST_SUCCESS
        _rounded_rect(pill, pill.get_rect(), fill, radius=12)
        screen.blit(pill, (rect.x + 16, y))
        screen.blit(surf, (rect.x + 16 + pad_x, y + pad_y))
        y -= 8
