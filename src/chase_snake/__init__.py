from .state import GameState, Point, Snake, new_game, new_snake

__all__ = ["GameState", "Point", "Snake", "new_game", "new_snake"]
