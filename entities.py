# entities.py
from __future__ import annotations
from dataclasses import dataclass
import random

from settings import (
    WIDTH, GROUND_LEVEL, PLAYER_X, PLAYER_SIZE, OBSTACLE_SIZE, POWERUP_SIZE,
    POWERUP_DURATION, POWERUP_MIN_LIFT, POWERUP_LIFT_RANGE,
)
from effects import PowerUpType


@dataclass(frozen=True)
class EntityView:
    """Read-only copy of an entity handed to the renderer."""
    x: float
    y: float
    width: float
    height: float
    kind: PowerUpType | None = None
    shield_active: bool = False


def overlaps(a, b) -> bool:
    """Axis-aligned box test on anything with x/y/width/height."""
    return (a.x < b.x + b.width and a.x + a.width > b.x
            and a.y < b.y + b.height and a.y + a.height > b.y)


@dataclass
class Player:
    x: float = PLAYER_X
    y: float = GROUND_LEVEL - PLAYER_SIZE
    width: float = PLAYER_SIZE
    height: float = PLAYER_SIZE
    velocity_y: float = 0.0
    grounded: bool = True
    jumping: bool = False
    shield_active: bool = False

    @classmethod
    def on_ground(cls, ground_level: float = GROUND_LEVEL) -> "Player":
        return cls(y=ground_level - PLAYER_SIZE)

    def update(self, gravity: float, ground_level: float):
        if not self.grounded:
            self.velocity_y += gravity
        self.y += self.velocity_y

        floor = ground_level - self.height
        if self.y >= floor:
            self.y = floor
            self.velocity_y = 0.0
            self.grounded = True
            self.jumping = False

    def jump(self, force: float) -> bool:
        if not self.grounded:
            return False
        self.grounded = False
        self.jumping = True
        self.velocity_y = force
        return True

    def view(self) -> EntityView:
        return EntityView(self.x, self.y, self.width, self.height,
                          shield_active=self.shield_active)


@dataclass
class Obstacle:
    x: float = WIDTH
    y: float = GROUND_LEVEL - OBSTACLE_SIZE
    width: float = OBSTACLE_SIZE
    height: float = OBSTACLE_SIZE

    @classmethod
    def spawn(cls, x: float = WIDTH, ground_level: float = GROUND_LEVEL) -> "Obstacle":
        return cls(x=x, y=ground_level - OBSTACLE_SIZE)

    def update(self, speed: float):
        self.x -= speed

    @property
    def offscreen(self) -> bool:
        return self.x + self.width <= 0

    def view(self) -> EntityView:
        return EntityView(self.x, self.y, self.width, self.height)


@dataclass
class PowerUp:
    x: float
    y: float
    kind: PowerUpType
    width: float = POWERUP_SIZE
    height: float = POWERUP_SIZE
    duration: float = POWERUP_DURATION

    @classmethod
    def spawn(cls, rng: random.Random, x: float = WIDTH,
              ground_level: float = GROUND_LEVEL) -> "PowerUp":
        # Kind first, then height, so a seeded rng reproduces both.
        kind = rng.choice(list(PowerUpType))
        y = ground_level - POWERUP_SIZE - rng.random() * POWERUP_LIFT_RANGE - POWERUP_MIN_LIFT
        return cls(x=x, y=y, kind=kind)

    def update(self, speed: float):
        self.x -= speed

    @property
    def offscreen(self) -> bool:
        return self.x + self.width <= 0

    def view(self) -> EntityView:
        return EntityView(self.x, self.y, self.width, self.height, kind=self.kind)
