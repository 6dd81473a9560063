"""
config.py — Shared constants for the entire application.
No logic, no imports from internal modules.
"""

# ── Grid ──────────────────────────────────────────────────────────
TILE_COUNT      = 20             # cells per side (toroidal, square)
GRID_SIZE       = 20             # pixels per cell
CELL            = GRID_SIZE

# ── Window ────────────────────────────────────────────────────────
PANEL_H         = 60
GAME_W = GAME_H = TILE_COUNT * CELL
OFFSET_X        = 10
OFFSET_Y        = PANEL_H + 10
WIDTH, HEIGHT   = GAME_W + 2 * OFFSET_X, GAME_H + PANEL_H + 20
FPS             = 60

# ── Colors ────────────────────────────────────────────────────────
BG          = (17,  17,  17)
GRID_COL    = (28,  28,  34)
PLAYER_COL  = (0,   255, 0)
PLAYER_DIM  = (0,   204, 0)
AI_COL      = (255, 255, 0)
AI_DIM      = (204, 204, 0)
FOOD_COL    = (255, 0,   0)
HAZARD_COL  = (139, 90,  43)
UI_COL      = (150, 150, 170)
BLACK       = (0,   0,   0)
WHITE       = (255, 255, 255)
PANEL_BG    = (12,  12,  20)
BORDER_COL  = (40,  40,  70)

POWERUP_COLORS = {
    "speed":    (0,   200, 255),
    "freeze":   (170, 230, 255),
    "magnet":   (255, 80,  200),
    "shrink":   (255, 140, 0),
    "blackout": (90,  60,  160),
    "growth":   (120, 255, 120),
}

# ── Gameplay ──────────────────────────────────────────────────────
FOOD_POINTS       = 10
BASE_SPEED        = 5.0          # ticks per second
MAX_SPEED         = 12.0
SPEED_INCREMENT   = 0.5
SPEED_SCORE_STEP  = 30           # combined score per speed-up
PLAYER_START      = (TILE_COUNT // 4, TILE_COUNT // 2)
AI_START          = (3 * TILE_COUNT // 4, TILE_COUNT // 2)

NORMAL_MOVE_THRESHOLD = 1.0
SPEED_MOVE_THRESHOLD  = 0.5
FREEZE_COUNTER_OFFSET = 100.0

# ── Power-ups ─────────────────────────────────────────────────────
SPAWN_ATTEMPTS            = 50
POWERUP_LIFETIME_MS       = 7000
POWERUP_SPAWN_INTERVAL_MS = 3000
POWERUP_RESPAWN_DELAY_MS  = 1000
POWERUP_BLINK_MS          = 2000  # blink during the last N ms

EFFECT_DURATIONS_MS = {
    "speed":    5000,
    "freeze":   3000,
    "magnet":   5000,
    "blackout": 4000,
}

SHRINK_MIN_LENGTH        = 3
SHRINK_ATTACK_THRESHOLD  = 5
SHRINK_ATTACK_AMOUNT     = 3
GROWTH_SEGMENTS          = 3
GROWTH_BONUS             = 20

NOTICE_TICKS     = 10
FLASH_DECAY      = 0.1

# ── Hazard ────────────────────────────────────────────────────────
HAZARD_FIRST_SPAWN_MS   = 5000
HAZARD_MIN_INTERVAL_MS  = 10000
HAZARD_MAX_INTERVAL_MS  = 20000
HAZARD_SPAWN_CHANCE     = 0.6
HAZARD_LIFETIME_MS      = 8000
HAZARD_DRIFT_MS         = 400
HAZARD_REVERSE_CHANCE   = 0.1

# ── AI ────────────────────────────────────────────────────────────
AI_MISTAKE_CHANCE  = 0.2
FOOD_PRIORITY      = 1
POWERUP_PRIORITY   = 2

# ── Agents & outcomes ─────────────────────────────────────────────
PLAYER = "player"
AI     = "ai"
TIE    = "tie"
