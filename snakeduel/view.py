"""
view.py — View layer.

Draws one Snapshot per frame. Reads nothing but the snapshot, so the
simulation never knows how it is drawn:
  - Pre-rendered grid surface (drawn once, blitted every frame)
  - Snakes with a bright head and dimmer body, and a pulsing outline on
    the player head while its speed boost is on
  - Power-up fading out over its lifetime and blinking near the end
  - Hazard with a wobble so it reads as moving
  - Blackout: everything outside a small circle around the player head
    goes dark while the AI's blackout is active
  - Screen flash overlay driven by the snapshot's flash intensity
  - HUD with scores, high score, active effects and pickup notices
  - Pause and game-over overlays

Public API:
    GameView(screen)       — bind to a pygame surface
    view.render(snapshot)  — draw the current frame
"""

import math
from typing import Optional

import pygame

from .config import (
    WIDTH, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, TILE_COUNT,
    BG, GRID_COL, FOOD_COL, HAZARD_COL, UI_COL, BLACK, WHITE,
    PANEL_BG, BORDER_COL, PLAYER_COL, PLAYER_DIM, AI_COL, AI_DIM,
    POWERUP_COLORS, PLAYER, AI,
)
from .entities import Direction
from .model import EffectView, Snapshot

BLACKOUT_RADIUS = 3 * CELL


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _cell_rect(cell: tuple[int, int], inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        OFFSET_X + cell[0] * CELL + inset,
        OFFSET_Y + cell[1] * CELL + inset,
        CELL - 2 * inset,
        CELL - 2 * inset,
    )


def _cell_center(cell: tuple[int, int]) -> tuple[int, int]:
    return OFFSET_X + cell[0] * CELL + CELL // 2, OFFSET_Y + cell[1] * CELL + CELL // 2


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a Snapshot."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self._anim_tick: int = 0

    # ── Main entry ───────────────────────────────────────────────
    def render(self, snap: Snapshot) -> None:
        self._anim_tick += 1

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        self._draw_food(snap.food)
        if snap.power_up is not None:
            self._draw_power_up(snap)
        if snap.hazard is not None and snap.hazard.active:
            self._draw_hazard(snap.hazard.cell)

        self._draw_snake(snap.player, snap.player_dir, PLAYER_COL, PLAYER_DIM)
        if snap.player_boosted and snap.player:
            self._draw_boost(snap.player[0])
        self._draw_snake(snap.ai, snap.ai_dir, AI_COL, AI_DIM)

        if snap.player_blinded:
            self._draw_blackout(snap.player[0] if snap.player else None)
        if snap.flash > 0:
            self._draw_flash(snap.flash)

        self._draw_border()
        self._draw_panel(snap)

        if snap.paused:
            self._draw_paused_overlay()
        elif not snap.running:
            self._draw_game_over_overlay(snap)

        pygame.display.flip()

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for i in range(TILE_COUNT + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (i * CELL, 0), (i * CELL, GAME_H))
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (0, i * CELL), (GAME_W, i * CELL))

    # ── Board content ────────────────────────────────────────────
    def _draw_food(self, food: tuple[int, int]) -> None:
        pygame.draw.rect(self.screen, FOOD_COL, _cell_rect(food, 1))

    def _draw_power_up(self, snap: Snapshot) -> None:
        pu = snap.power_up
        if pu.blinking and (self._anim_tick // 8) % 2:
            return
        color = POWERUP_COLORS.get(pu.kind, WHITE)
        alpha = int(90 + 165 * pu.fade)
        surf = pygame.Surface((CELL, CELL), pygame.SRCALPHA)
        pygame.draw.circle(surf, _with_alpha(color, alpha), (CELL // 2, CELL // 2), CELL // 2 - 1)
        letter = self.font_tiny.render(pu.kind[0].upper(), True, BLACK)
        surf.blit(letter, letter.get_rect(center=(CELL // 2, CELL // 2)))
        self.screen.blit(surf, _cell_rect(pu.cell).topleft)

    def _draw_hazard(self, cell: tuple[int, int]) -> None:
        cx, cy = _cell_center(cell)
        wobble = int(2 * math.sin(self._anim_tick * 0.3))
        pygame.draw.circle(self.screen, HAZARD_COL, (cx, cy + wobble), CELL // 2)
        for sign in (+1, -1):
            pygame.draw.circle(self.screen, WHITE, (cx + sign * 4, cy - 3 + wobble), 2)

    def _draw_snake(self, body: tuple, direction: Direction,
                    color: tuple, dim_color: tuple) -> None:
        for i, cell in enumerate(body):
            rect = _cell_rect(cell)
            pygame.draw.rect(self.screen, color if i == 0 else dim_color, rect)
            pygame.draw.rect(self.screen, BG, rect, 1)
        if body and not direction.is_none:
            self._draw_eyes(body[0], direction)

    def _draw_eyes(self, head: tuple[int, int], direction: Direction) -> None:
        cx, cy = _cell_center(head)
        dx, dy = direction.x, direction.y
        px, py = -dy, dx  # perpendicular
        for sign in (+1, -1):
            ex = int(cx + dx * 4 + sign * px * 4)
            ey = int(cy + dy * 4 + sign * py * 4)
            pygame.draw.rect(self.screen, BLACK, (ex - 1, ey - 1, 3, 3))

    # ── Presentation-only effects ────────────────────────────────
    def _draw_boost(self, head: tuple[int, int]) -> None:
        pulse = (self._anim_tick // 6) % 2
        pygame.draw.rect(self.screen, _lerp_color(PLAYER_COL, WHITE, 0.6),
                         _cell_rect(head, -1 - pulse), 2)

    def _draw_blackout(self, head: Optional[tuple[int, int]]) -> None:
        dark = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        dark.fill((0, 0, 0, 240))
        if head is not None:
            cx = head[0] * CELL + CELL // 2
            cy = head[1] * CELL + CELL // 2
            pygame.draw.circle(dark, (0, 0, 0, 0), (cx, cy), BLACKOUT_RADIUS)
        self.screen.blit(dark, (OFFSET_X, OFFSET_Y))

    def _draw_flash(self, intensity: float) -> None:
        flash = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        flash.fill((255, 255, 255, int(140 * intensity)))
        self.screen.blit(flash, (OFFSET_X, OFFSET_Y))

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self) -> None:
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, snap: Snapshot) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render(f"You: {snap.player_score}", True, PLAYER_COL), (12, 6))
        ai_txt = self.font_small.render(f"AI: {snap.ai_score}", True, AI_COL)
        self.screen.blit(ai_txt, (WIDTH - ai_txt.get_width() - 12, 6))

        hs = self.font_tiny.render(f"High Score: {snap.high_score}", True, UI_COL)
        self.screen.blit(hs, hs.get_rect(midtop=(WIDTH // 2, 8)))

        self._draw_effect(snap.player_effect, PLAYER_COL, left=True)
        self._draw_effect(snap.ai_effect, AI_COL, left=False)

        for agent, text in snap.notices:
            color = PLAYER_COL if agent == PLAYER else AI_COL
            surf = self.font_tiny.render(text, True, color)
            x = WIDTH // 2 - 70 if agent == PLAYER else WIDTH // 2 + 70
            self.screen.blit(surf, surf.get_rect(center=(x, PANEL_H - 14)))

    def _draw_effect(self, effect: Optional[EffectView], color: tuple, left: bool) -> None:
        if effect is None:
            return
        label = f"{effect.kind.upper()} {effect.seconds_remaining:.1f}s"
        surf = self.font_tiny.render(label, True, _lerp_color(color, WHITE, 0.3))
        if left:
            self.screen.blit(surf, (12, 30))
        else:
            self.screen.blit(surf, (WIDTH - surf.get_width() - 12, 30))

    # ── Overlays ─────────────────────────────────────────────────
    def _draw_overlay_base(self) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 200))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

    def _draw_text_line(self, text: str, color: tuple,
                        cy: int, font: pygame.font.Font) -> int:
        surf = font.render(text, True, color)
        self.screen.blit(surf, surf.get_rect(center=(WIDTH // 2, cy)))
        return cy + surf.get_height() + 8

    def _draw_paused_overlay(self) -> None:
        self._draw_overlay_base()
        cy = OFFSET_Y + GAME_H // 2 - 20
        cy = self._draw_text_line("PAUSED", FOOD_COL, cy, self.font_title)
        self._draw_text_line("PRESS  P  TO RESUME", UI_COL, cy, self.font_tiny)

    def _draw_game_over_overlay(self, snap: Snapshot) -> None:
        self._draw_overlay_base()
        if snap.winner == PLAYER:
            title, color = "You Win!", PLAYER_COL
        elif snap.winner == AI:
            title, color = "AI Wins!", AI_COL
        else:
            title, color = "It's a Tie!", WHITE

        cy = OFFSET_Y + GAME_H // 3
        cy = self._draw_text_line(title, color, cy, self.font_title)
        cy += 6
        cy = self._draw_text_line(f"Your score: {snap.player_score}", PLAYER_COL, cy, self.font_small)
        cy = self._draw_text_line(f"AI score: {snap.ai_score}", AI_COL, cy, self.font_small)
        cy = self._draw_text_line(f"High score: {snap.high_score}", UI_COL, cy, self.font_small)
        cy += 10
        self._draw_text_line("R / ENTER — PLAY AGAIN", UI_COL, cy, self.font_tiny)

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        fonts = [
            ("font_title", "courier", 36, True),
            ("font_small", "courier", 16, True),
            ("font_tiny",  "courier", 12, False),
        ]
        for attr, name, size, bold in fonts:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception:
                setattr(self, attr, pygame.font.SysFont(None, size))
