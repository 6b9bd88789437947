# main.py
import logging
import arcade
from settings import WIDTH, HEIGHT, SKY, TITLE
from game_view import GameView


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = arcade.Window(WIDTH, HEIGHT, TITLE, resizable=False)
    arcade.set_background_color(SKY)
    window.show_view(GameView())
    arcade.run()


if __name__ == "__main__":
    main()
