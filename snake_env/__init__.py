from snake_env.snake import Snake
from snake_env.snakeenv import SnakeEnv

__all__ = ["Snake", "SnakeEnv"]
