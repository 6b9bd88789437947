# effects.py
"""Power-up kinds and the table of currently running timed effects."""
from __future__ import annotations
from enum import Enum
import logging

from settings import GOLD, SHIELD_BLUE, LIME, VIOLET

logger = logging.getLogger(__name__)


class PowerUpType(str, Enum):
    SCORE_MULTIPLIER = "scoreMultiplier"
    SHIELD = "shield"
    HIGH_JUMP = "highJump"
    SLOW_TIME = "slowTime"


# Per-kind visuals. HUD banner is None when the effect has no banner.
POWERUP_DEFS = {
    PowerUpType.SCORE_MULTIPLIER: {"color": GOLD, "banner": "Multiplier: x2"},
    PowerUpType.SHIELD: {"color": SHIELD_BLUE, "banner": "Shield Active!"},
    PowerUpType.HIGH_JUMP: {"color": LIME, "banner": None},
    PowerUpType.SLOW_TIME: {"color": VIOLET, "banner": "Time Slowed!"},
}


class ActiveEffects:
    """Running effects keyed by kind, each with a (start, expiry) window in ms.

    Picking up a kind that is already running refreshes its window, so there
    is only ever one pending expiry per kind.
    """

    def __init__(self):
        self._windows: dict[PowerUpType, tuple[float, float]] = {}

    def __contains__(self, kind: PowerUpType) -> bool:
        return kind in self._windows

    def activate(self, kind: PowerUpType, now: float, duration: float):
        self._windows[kind] = (now, now + duration)
        logger.debug(f"Effect {kind.value} active until {now + duration:.0f}")

    def consume(self, kind: PowerUpType) -> bool:
        """Drop an effect early (a shield absorbing a hit). Returns whether it was running."""
        return self._windows.pop(kind, None) is not None

    def expire(self, now: float) -> list[PowerUpType]:
        done = [k for k, (_, end) in self._windows.items() if end <= now]
        for kind in done:
            del self._windows[kind]
            logger.debug(f"Effect {kind.value} expired")
        return done

    def overlap(self, kind: PowerUpType, start: float, end: float) -> float:
        """Milliseconds of [start, end] during which `kind` was running."""
        window = self._windows.get(kind)
        if window is None:
            return 0.0
        return max(0.0, min(end, window[1]) - max(start, window[0]))

    def clear(self):
        self._windows.clear()
