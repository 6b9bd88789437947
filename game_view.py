# game_view.py
from __future__ import annotations
import arcade

from settings import (
    WIDTH, HEIGHT, GROUND_LEVEL, STAR_COUNT,
    SKY, GROUND, STAR, PLAYER_COLOR, OBST, SHIELD_RING, WHITE, HIGHSCORE_PATH,
)
from effects import POWERUP_DEFS, PowerUpType
from game import Game, FrameSnapshot
from scheduler import FrameScheduler, now_ms
from storage import JsonStore, KeyValueStore

HUD_Y = HEIGHT - 25
BANNER_STEP = 25


def _bottom(y: float, h: float) -> float:
    """Convert a top-down y (canvas style) into an arcade bottom edge."""
    return HEIGHT - y - h


class GameView(arcade.View):
    def __init__(self, store: KeyValueStore | None = None):
        super().__init__()
        self.scheduler = FrameScheduler()
        self.game = Game(store or JsonStore(HIGHSCORE_PATH),
                         self.scheduler.request, clock=now_ms)

        # --- Text ---
        self.score_text = arcade.Text("", 10, HUD_Y, WHITE, 20)
        self.high_text = arcade.Text("", WIDTH - 10, HUD_Y, WHITE, 20, anchor_x="right")
        self.banner_texts = {
            kind: arcade.Text(d["banner"], WIDTH / 2, HUD_Y - i * BANNER_STEP,
                              d["color"], 20, anchor_x="center")
            for i, (kind, d) in enumerate(
                (k, d) for k, d in POWERUP_DEFS.items() if d["banner"])
        }
        self.center_text = arcade.Text("", WIDTH / 2, HEIGHT / 2, WHITE, 24,
                                       width=WIDTH, align="center",
                                       anchor_x="center", anchor_y="center",
                                       multiline=True)

        self.game.start()

    # ---------- Input ----------
    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.SPACE:
            self.game.press_space()

    # ---------- Update ----------
    def on_update(self, dt: float):
        self.scheduler.run_frame(now_ms())

    # ---------- Draw ----------
    def on_draw(self):
        self.clear()
        frame = self.game.snapshot()
        self._draw_background(frame)
        self._draw_player(frame)
        for o in frame.obstacles:
            arcade.draw_lbwh_rectangle_filled(o.x, _bottom(o.y, o.height), o.width, o.height, OBST)
        for p in frame.power_ups:
            color = POWERUP_DEFS[p.kind]["color"]
            arcade.draw_lbwh_rectangle_filled(p.x, _bottom(p.y, p.height), p.width, p.height, color)
        self._draw_hud(frame)

    def _draw_background(self, frame: FrameSnapshot):
        ground_h = HEIGHT - GROUND_LEVEL
        arcade.draw_lbwh_rectangle_filled(0, ground_h, WIDTH, GROUND_LEVEL, SKY)
        arcade.draw_lbwh_rectangle_filled(0, 0, WIDTH, ground_h, GROUND)
        for i in range(STAR_COUNT):
            x = (i * 50 + frame.background_x) % WIDTH
            y = (i * 20) % GROUND_LEVEL
            arcade.draw_circle_filled(x, HEIGHT - y, 1, STAR)

    def _draw_player(self, frame: FrameSnapshot):
        p = frame.player
        arcade.draw_lbwh_rectangle_filled(p.x, _bottom(p.y, p.height), p.width, p.height, PLAYER_COLOR)
        if p.shield_active:
            arcade.draw_circle_outline(p.x + p.width / 2, HEIGHT - (p.y + p.height / 2),
                                       p.width, SHIELD_RING, 4)

    def _draw_hud(self, frame: FrameSnapshot):
        self.score_text.text = f"Score: {frame.score}"
        self.score_text.draw()
        self.high_text.text = f"High Score: {frame.high_score}"
        self.high_text.draw()

        active = {
            PowerUpType.SCORE_MULTIPLIER: frame.score_multiplier > 1,
            PowerUpType.SHIELD: frame.shield_active,
            PowerUpType.SLOW_TIME: frame.time_slowed,
        }
        for kind, text in self.banner_texts.items():
            if active.get(kind):
                text.draw()

        if frame.message:
            self.center_text.text = frame.message
            self.center_text.draw()
