"""
collisions.py — Collision engine.

Runs after every movement step: once per tick normally, once per cell
when a boosted player covers two. Checks happen in a fixed order and the
first hit ends the game, so a step where several collisions are true at
once always resolves the same way.
"""

import logging
from typing import Optional

from .config import PLAYER, AI, TIE
from .entities import Snake
from .state import SimulationState

logger = logging.getLogger(__name__)


def winner_by_score(state: SimulationState) -> str:
    if state.player.score > state.ai.score:
        return PLAYER
    if state.ai.score > state.player.score:
        return AI
    return TIE


def _hits_body(head, snake: Snake) -> bool:
    """True if `head` lies on any segment of `snake` except its head."""
    for i, segment in enumerate(snake.body):
        if i >= 1 and segment == head:
            return True
    return False


def check_collisions(state: SimulationState) -> Optional[str]:
    """
    Resolve this tick's collisions.
    Returns the winner ("player", "ai" or "tie") if the game ended, else None.
    Dead snakes are cleared to an empty body.
    """
    player, ai = state.player, state.ai

    if player.alive and ai.alive:
        ph, ah = player.head, ai.head

        if _hits_body(ph, player):
            logger.info("player ran into itself")
            player.kill()
            return AI

        if _hits_body(ah, ai):
            logger.info("ai ran into itself")
            ai.kill()
            return PLAYER

        if ph == ah:
            logger.info("head-on collision")
            player.kill()
            ai.kill()
            return winner_by_score(state)

        if _hits_body(ph, ai):
            logger.info("player ran into the ai")
            player.kill()
            return AI

        if _hits_body(ah, player):
            logger.info("ai ran into the player")
            ai.kill()
            return PLAYER

    if not player.alive and not ai.alive:
        return winner_by_score(state)

    return None
