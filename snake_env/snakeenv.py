# snakeenv.py
# -------------------------------------------------------
# Gymnasium environment around the wrapping snake game
# -------------------------------------------------------

import gymnasium as gym
from gymnasium import spaces
import numpy as np
import cv2

from snake_env.snake import GRID_COLS, GRID_ROWS, TICK_MS, WINDOW_TITLE, Snake
from snake_env.view import draw_frame, present


class SnakeEnv(gym.Env):
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 1000 // TICK_MS}

    def __init__(self, render_mode=None, max_steps=5000, grid=(GRID_COLS, GRID_ROWS)):
        super().__init__()
        self.render_mode = render_mode
        self.max_steps = max_steps
        self.grid = grid

        # 4 discrete actions: 0=left, 1=right, 2=down, 3=up
        self.action_space = spaces.Discrete(4)

        # Observation: [head_x, head_y, food_dx, food_dy, snake_length]
        # The length can pass the cell count by one on the crashing step
        cols, rows = grid
        limit = float(cols * rows + 1)
        self.observation_space = spaces.Box(
            low=np.full((5,), -limit, dtype=np.float32),
            high=np.full((5,), limit, dtype=np.float32),
            dtype=np.float32,
        )

        self.window_name = WINDOW_TITLE
        self._window_open = False

        # Set in reset()
        self.snake = None
        self.steps = 0

    # ---------- Gym API ----------
    def reset(self, *, seed=None, options=None):
        super().reset(seed=seed)
        self.snake = Snake.spawn(self.np_random, self.grid)
        self.steps = 0

        if self.render_mode == "human":
            self._render_frame()
        return self._get_obs(), {}

    def step(self, action):
        self.steps += 1

        self.snake.turn(int(action))
        ate = self.snake.move()

        reward = 0.0
        if ate:
            reward += 10.0
        terminated = self.snake.dead
        if terminated:
            reward -= 10.0

        # Time-limit truncation to keep episodes bounded
        truncated = self.steps >= self.max_steps

        if self.render_mode == "human":
            self._render_frame()

        return self._get_obs(), reward, terminated, truncated, {"score": self.snake.score}

    def render(self):
        if self.render_mode == "rgb_array":
            return cv2.cvtColor(draw_frame(self.snake), cv2.COLOR_BGR2RGB)
        elif self.render_mode == "human":
            self._render_frame()

    def close(self):
        if self._window_open:
            cv2.destroyWindow(self.window_name)
            self._window_open = False

    # ---------- Helpers ----------
    def _get_obs(self):
        head_x, head_y = self.snake.head
        food_dx = self.snake.food_pos[0] - head_x
        food_dy = self.snake.food_pos[1] - head_y
        snake_length = len(self.snake.pieces)
        return np.array([head_x, head_y, food_dx, food_dy, snake_length], dtype=np.float32)

    def _render_frame(self):
        present(draw_frame(self.snake), self.window_name)
        self._window_open = True
        cv2.waitKey(int(1000 / self.metadata["render_fps"]))
