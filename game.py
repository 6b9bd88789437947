# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
import logging
import math
import random
from typing import Callable

from settings import (
    WIDTH, GROUND_LEVEL, GRAVITY, JUMP_FORCE, HIGH_JUMP_FORCE,
    START_OBSTACLE_SPEED, START_OBSTACLE_INTERVAL, MIN_OBSTACLE_INTERVAL,
    POWERUP_INTERVAL, SPEED_STEP, INTERVAL_STEP, BOOSTED_MULTIPLIER,
    POINTS_PER_SECOND, PARALLAX_SPEED, START_MESSAGE_MS,
)
from entities import EntityView, Player, Obstacle, PowerUp, overlaps
from effects import ActiveEffects, PowerUpType
from scheduler import FrameCallback, now_ms
from storage import KeyValueStore, load_high_score, save_high_score

logger = logging.getLogger(__name__)

START_MESSAGE = "Press SPACE to start / jump"


class GameState(Enum):
    RUNNING = auto()
    GAME_OVER = auto()


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one frame."""
    player: EntityView
    obstacles: tuple[EntityView, ...]
    power_ups: tuple[EntityView, ...]
    background_x: float
    score: int
    high_score: int
    score_multiplier: int
    shield_active: bool
    time_slowed: bool
    game_over: bool
    message: str


class Game:
    """Owns one run: entities, spawn timers, difficulty, score and effects.

    Host services are injected: `store` persists the high score,
    `schedule_frame` registers the next tick, `clock` returns milliseconds.
    """

    def __init__(self, store: KeyValueStore,
                 schedule_frame: Callable[[FrameCallback], None],
                 clock: Callable[[], float] = now_ms,
                 rng: random.Random | None = None):
        self.store = store
        self.schedule_frame = schedule_frame
        self.clock = clock
        self.rng = rng or random.Random()

        self.high_score = load_high_score(store)
        self.effects = ActiveEffects()
        self.background_x = 0.0
        self.created_at = clock()
        self._reset(self.created_at)

    def _reset(self, now: float):
        self.player = Player.on_ground(GROUND_LEVEL)
        self.obstacles: list[Obstacle] = []
        self.power_ups: list[PowerUp] = []
        self.obstacle_speed = START_OBSTACLE_SPEED
        self.obstacle_interval = START_OBSTACLE_INTERVAL
        self.power_up_interval = POWERUP_INTERVAL
        self.score = 0.0
        self.state = GameState.RUNNING
        self.effects.clear()
        self.last_obstacle_time = now
        self.last_power_up_time = now
        self.last_update_time = now
        self.now = now

    # ---------- Derived state ----------
    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def score_multiplier(self) -> int:
        return BOOSTED_MULTIPLIER if PowerUpType.SCORE_MULTIPLIER in self.effects else 1

    @property
    def shield_active(self) -> bool:
        return PowerUpType.SHIELD in self.effects

    @property
    def time_slowed(self) -> bool:
        return PowerUpType.SLOW_TIME in self.effects

    @property
    def jump_force(self) -> float:
        return HIGH_JUMP_FORCE if PowerUpType.HIGH_JUMP in self.effects else JUMP_FORCE

    @property
    def current_speed(self) -> float:
        return self.obstacle_speed / 2 if self.time_slowed else self.obstacle_speed

    @property
    def message(self) -> str:
        if self.game_over:
            return f"GAME OVER\nYour score: {math.floor(self.score)}\nPress SPACE to restart"
        if self.now - self.created_at < START_MESSAGE_MS:
            return START_MESSAGE
        return ""

    # ---------- Input ----------
    def jump(self) -> bool:
        if self.game_over:
            return False
        self._expire_effects(self.clock())
        return self.player.jump(self.jump_force)

    def press_space(self):
        if self.game_over:
            self.restart()
        else:
            self.jump()

    # ---------- Run control ----------
    def start(self):
        self.last_update_time = self.clock()
        logger.info(f"Run started (high score {self.high_score})")
        self.schedule_frame(self.tick)

    def restart(self):
        self._reset(self.clock())
        self._sync_player()
        logger.info("Run restarted")
        self.schedule_frame(self.tick)

    def tick(self, timestamp: float):
        if self.game_over:
            return

        previous = self.last_update_time
        self.last_update_time = timestamp
        self.now = timestamp
        # Weigh the multiplier window before expiry drops it.
        boosted = self.effects.overlap(PowerUpType.SCORE_MULTIPLIER, previous, timestamp)
        self._expire_effects(timestamp)
        self.background_x = (self.background_x - PARALLAX_SPEED) % WIDTH

        self.player.update(GRAVITY, GROUND_LEVEL)
        speed = self.current_speed
        for o in self.obstacles:
            o.update(speed)
        for p in self.power_ups:
            p.update(speed)

        self._spawn(timestamp)

        self._sweep_obstacles()
        if self.game_over:
            return
        self._sweep_power_ups(timestamp)

        self._ramp_difficulty()
        self._accrue_score(timestamp - previous, boosted)

        self.obstacles = [o for o in self.obstacles if not o.offscreen]
        self.power_ups = [p for p in self.power_ups if not p.offscreen]

        self.schedule_frame(self.tick)

    # ---------- Tick steps ----------
    def _spawn(self, now: float):
        slow = 2 if self.time_slowed else 1
        if now - self.last_obstacle_time >= self.obstacle_interval * slow:
            self.obstacles.append(Obstacle.spawn(WIDTH, GROUND_LEVEL))
            self.last_obstacle_time = now
        if now - self.last_power_up_time >= self.power_up_interval * slow:
            self.power_ups.append(PowerUp.spawn(self.rng, WIDTH, GROUND_LEVEL))
            self.last_power_up_time = now

    def _sweep_obstacles(self):
        absorbed: set[int] = set()
        for obstacle in self.obstacles:
            if not overlaps(self.player, obstacle):
                continue
            if self.effects.consume(PowerUpType.SHIELD):
                absorbed.add(id(obstacle))
                logger.debug("Shield absorbed a hit")
            else:
                self._end_game()
                break
        if absorbed:
            self.obstacles = [o for o in self.obstacles if id(o) not in absorbed]
            self._sync_player()

    def _sweep_power_ups(self, now: float):
        collected = [p for p in self.power_ups if overlaps(self.player, p)]
        if not collected:
            return
        taken = {id(p) for p in collected}
        self.power_ups = [p for p in self.power_ups if id(p) not in taken]
        for power_up in collected:
            self.activate_power_up(power_up, now)

    def activate_power_up(self, power_up: PowerUp, now: float):
        logger.debug(f"Picked up {power_up.kind.value}")
        self.effects.activate(power_up.kind, now, power_up.duration)
        self._sync_player()

    def _ramp_difficulty(self):
        rate = 0.5 if self.time_slowed else 1.0
        self.obstacle_speed += SPEED_STEP * rate
        self.obstacle_interval = max(MIN_OBSTACLE_INTERVAL,
                                     self.obstacle_interval - INTERVAL_STEP * rate)

    def _accrue_score(self, elapsed: float, boosted: float):
        weighted = max(0.0, elapsed) + boosted * (BOOSTED_MULTIPLIER - 1)
        self.score += weighted / 1000 * POINTS_PER_SECOND

    def _expire_effects(self, now: float):
        if self.effects.expire(now):
            self._sync_player()

    def _sync_player(self):
        self.player.shield_active = self.shield_active

    def _end_game(self):
        self.state = GameState.GAME_OVER
        final = math.floor(self.score)
        logger.info(f"Game over with score {final}")
        if final > self.high_score:
            self.high_score = final
            save_high_score(self.store, final)
            logger.info(f"New high score {final}")

    # ---------- Rendering ----------
    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            player=self.player.view(),
            obstacles=tuple(o.view() for o in self.obstacles),
            power_ups=tuple(p.view() for p in self.power_ups),
            background_x=self.background_x,
            score=math.floor(self.score),
            high_score=self.high_score,
            score_multiplier=self.score_multiplier,
            shield_active=self.shield_active,
            time_slowed=self.time_slowed,
            game_over=self.game_over,
            message=self.message,
        )
