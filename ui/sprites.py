"""Procedurally drawn sprite sheets."""

import pygame
from .colors import BEETLE_VARIANTS, BEETLE_OUTLINE, BEETLE_EYES, BEETLE_GOO


# Sheets are shared by every enemy of the same size
_sheet_cache = {}


def create_beetlemorph_sheet(size: int, frames: int) -> pygame.Surface:
    """
    Build the beetlemorph sprite sheet.

    Columns are animation frames (0 = alive, 1..frames-1 = splat), rows are
    shell color variants. Every cell is ``size`` x ``size``.

    Args:
        size: Edge length of one cell in pixels
        frames: Number of animation frames, including the living pose

    Returns:
        Transparent surface of frames * size by len(variants) * size
    """
    key = (size, frames)
    if key in _sheet_cache:
        return _sheet_cache[key]

    columns = frames
    last_frame = max(1, frames - 1)
    sheet = pygame.Surface((columns * size, len(BEETLE_VARIANTS) * size), pygame.SRCALPHA)

    for row, shell in enumerate(BEETLE_VARIANTS):
        for frame in range(columns):
            cell = pygame.Rect(frame * size, row * size, size, size)
            if frame == 0:
                _draw_beetle(sheet, cell, shell)
            else:
                _draw_splat(sheet, cell, shell, frame / last_frame)

    _sheet_cache[key] = sheet
    return sheet


def _draw_beetle(surface: pygame.Surface, cell: pygame.Rect, shell: tuple):
    s = cell.width
    cx, cy = cell.centerx, cell.centery

    # Legs
    for i in range(3):
        ly = cell.top + s * (0.38 + i * 0.14)
        pygame.draw.line(surface, BEETLE_OUTLINE, (cx - s * 0.22, ly), (cx - s * 0.42, ly + s * 0.06), 3)
        pygame.draw.line(surface, BEETLE_OUTLINE, (cx + s * 0.22, ly), (cx + s * 0.42, ly + s * 0.06), 3)

    # Shell halves
    body = pygame.Rect(0, 0, s * 0.5, s * 0.62)
    body.center = (cx, cy + s * 0.05)
    pygame.draw.ellipse(surface, shell, body)
    pygame.draw.ellipse(surface, BEETLE_OUTLINE, body, 2)
    pygame.draw.line(surface, BEETLE_OUTLINE, (cx, body.top + s * 0.12), (cx, body.bottom), 2)

    # Head
    head = pygame.Rect(0, 0, s * 0.3, s * 0.2)
    head.center = (cx, body.top + s * 0.04)
    pygame.draw.ellipse(surface, BEETLE_OUTLINE, head)
    pygame.draw.circle(surface, BEETLE_EYES, (int(cx - s * 0.06), int(head.centery)), max(2, s // 26))
    pygame.draw.circle(surface, BEETLE_EYES, (int(cx + s * 0.06), int(head.centery)), max(2, s // 26))

    # Antennae
    pygame.draw.line(surface, BEETLE_OUTLINE, (cx - s * 0.05, head.top), (cx - s * 0.16, cell.top + s * 0.06), 2)
    pygame.draw.line(surface, BEETLE_OUTLINE, (cx + s * 0.05, head.top), (cx + s * 0.16, cell.top + s * 0.06), 2)


def _draw_splat(surface: pygame.Surface, cell: pygame.Rect, shell: tuple, progress: float):
    """Shell fragments flying apart; progress runs from just after the hit to 1.0."""
    s = cell.width
    cx, cy = cell.centerx, cell.centery
    spread = s * (0.12 + 0.26 * progress)
    chunk = max(2, int(s * 0.12 * (1.2 - progress)))

    pygame.draw.circle(surface, BEETLE_GOO, (cx, cy), int(s * 0.14 * (1.4 - progress)))
    offsets = [(-1, -1), (1, -1), (-1, 1), (1, 1), (0, -1.3), (0, 1.3), (-1.3, 0), (1.3, 0)]
    for dx, dy in offsets:
        px = int(cx + dx * spread)
        py = int(cy + dy * spread)
        pygame.draw.circle(surface, shell, (px, py), chunk)
        pygame.draw.circle(surface, BEETLE_OUTLINE, (px, py), chunk, 1)
