# snake.py
# -------------------------------------------------------
# Snake game state on a wrapping grid and its step rule
# -------------------------------------------------------

import numpy as np

# Grid size in cells and cell size in pixels
GRID_COLS = 50
GRID_ROWS = 50
CELL = 20

WINDOW_WIDTH = GRID_COLS * CELL
WINDOW_HEIGHT = GRID_ROWS * CELL
WINDOW_TITLE = "Snake"

# Milliseconds per move
TICK_MS = 50

# Actions: 0=left, 1=right, 2=down, 3=up (y grows downwards on screen)
LEFT, RIGHT, DOWN, UP = 0, 1, 2, 3
ACTION_NAMES = ["LEFT", "RIGHT", "DOWN", "UP"]
VELOCITIES = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    UP: (0, -1),
}


# ==========================================================
# Helper functions
# ==========================================================

def wrap_position(pos, max_pos):
    """Wrap a cell position back into the grid on both axes."""
    return (pos[0] % max_pos[0], pos[1] % max_pos[1])


def random_position(rng, max_x, max_y):
    return (int(rng.integers(max_x)), int(rng.integers(max_y)))


def random_velocity(rng):
    return VELOCITIES[int(rng.integers(len(VELOCITIES)))]


def collision_with_self(new_head, pieces):
    return new_head in pieces


# ==========================================================
# Game state
# ==========================================================

class Snake:
    """
    Snake on a toroidal grid.

    Attributes:
        pieces: list of (x, y) cells from tail (index 0) to head (last item)
        velocity: unit heading (dx, dy)
        max: grid size as (cols, rows)
        food_pos: cell holding the food
        dead: set once the head runs into the body, never cleared
        score: number of foods eaten
    """

    def __init__(self, pieces, velocity, food_pos, max_pos=(GRID_COLS, GRID_ROWS), rng=None):
        if not pieces:
            raise ValueError("a snake needs at least one piece")
        if tuple(velocity) not in VELOCITIES.values():
            raise ValueError(f"velocity must be a unit direction, got {velocity!r}")
        if max_pos[0] <= 0 or max_pos[1] <= 0:
            raise ValueError(f"grid size must be positive, got {max_pos!r}")

        self.max = (int(max_pos[0]), int(max_pos[1]))
        self.pieces = [wrap_position(p, self.max) for p in pieces]
        self.velocity = tuple(velocity)
        self.food_pos = wrap_position(food_pos, self.max)
        self.dead = False
        self.score = 0
        self._rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def spawn(cls, rng, max_pos=(GRID_COLS, GRID_ROWS)):
        """One piece on a random cell, random heading, food on a random cell."""
        cols, rows = max_pos
        return cls(
            pieces=[random_position(rng, cols, rows)],
            velocity=random_velocity(rng),
            food_pos=random_position(rng, cols, rows),
            max_pos=max_pos,
            rng=rng,
        )

    @property
    def head(self):
        return self.pieces[-1]

    def turn(self, action):
        """
        Point the snake towards `action`. A request that reverses the
        current heading on the same axis is ignored. Returns True when
        the heading changed.
        """
        if action not in VELOCITIES:
            raise ValueError(f"unknown action {action!r}")
        new_velocity = VELOCITIES[action]
        if new_velocity == (-self.velocity[0], -self.velocity[1]):
            return False
        if new_velocity == self.velocity:
            return False
        self.velocity = new_velocity
        return True

    def move(self):
        """Advance one tick. Returns True if the food was eaten."""
        new_head = wrap_position(
            (self.head[0] + self.velocity[0], self.head[1] + self.velocity[1]),
            self.max,
        )

        ate = new_head == self.food_pos
        if ate:
            # Occupied cells are not excluded, food may land under the body
            self.food_pos = random_position(self._rng, *self.max)
            self.score += 1
        else:
            self.pieces = self.pieces[1:]

        if collision_with_self(new_head, self.pieces):
            print(f"Collision at {new_head}")
            self.dead = True

        # Appended even on death so the last frame shows the crash
        self.pieces.append(new_head)
        return ate
