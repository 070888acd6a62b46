"""
Tests for view.py - rasterizing the game onto a pixel buffer.
"""

import numpy as np
from unittest.mock import patch

from snake_env.snake import Snake, VELOCITIES, RIGHT, CELL, WINDOW_WIDTH, WINDOW_HEIGHT
from snake_env.view import (
    BACKGROUND_COLOR,
    SNAKE_COLOR,
    cell_rect,
    draw_frame,
    present,
)


def painted_cells(img, cell):
    """Grid cells whose pixels are not background."""
    rows, cols = img.shape[0] // cell, img.shape[1] // cell
    painted = set()
    for y in range(rows):
        for x in range(cols):
            block = img[y * cell:(y + 1) * cell, x * cell:(x + 1) * cell]
            if not (block == BACKGROUND_COLOR).all():
                painted.add((x, y))
    return painted


class TestCellRect:

    def test_origin_cell(self):
        assert cell_rect((0, 0), 5) == ((0, 0), (4, 4))

    def test_offset_cell(self):
        assert cell_rect((2, 3), 10) == ((20, 30), (29, 39))


class TestDrawFrame:
    """Tests for draw_frame."""

    def test_default_frame_matches_window_size(self):
        snake = Snake(pieces=[(0, 0)], velocity=VELOCITIES[RIGHT], food_pos=(3, 3))
        img = draw_frame(snake)
        assert img.shape == (WINDOW_HEIGHT, WINDOW_WIDTH, 3)
        assert img.dtype == np.uint8

    def test_paints_exactly_snake_and_food_cells(self):
        snake = Snake(
            pieces=[(0, 1), (1, 1), (2, 1)],
            velocity=VELOCITIES[RIGHT],
            food_pos=(3, 0),
            max_pos=(4, 3),
        )
        img = draw_frame(snake, cell=5)

        assert img.shape == (15, 20, 3)
        assert painted_cells(img, 5) == {(0, 1), (1, 1), (2, 1), (3, 0)}

    def test_cells_are_filled_squares(self):
        snake = Snake(pieces=[(1, 2)], velocity=VELOCITIES[RIGHT], food_pos=(0, 0), max_pos=(4, 4))
        img = draw_frame(snake, cell=CELL)
        block = img[2 * CELL:3 * CELL, 1 * CELL:2 * CELL]
        assert (block == SNAKE_COLOR).all()
        # Neighbouring pixel stays background
        assert (img[2 * CELL, 2 * CELL] == BACKGROUND_COLOR).all()

    def test_whole_buffer_is_rebuilt(self):
        snake = Snake(pieces=[(0, 0)], velocity=VELOCITIES[RIGHT], food_pos=(3, 3), max_pos=(4, 4))
        img = draw_frame(snake, cell=5)
        snake.move()
        same = draw_frame(snake, img, cell=5)

        assert same is img
        assert painted_cells(img, 5) == {(1, 0), (3, 3)}

    def test_wrong_sized_buffer_is_replaced(self):
        snake = Snake(pieces=[(0, 0)], velocity=VELOCITIES[RIGHT], food_pos=(1, 1), max_pos=(2, 2))
        stale = np.zeros((3, 3, 3), dtype=np.uint8)
        img = draw_frame(snake, stale, cell=5)
        assert img is not stale
        assert img.shape == (10, 10, 3)


class TestPresent:

    def test_shows_frame_in_named_window(self):
        frame = np.zeros((4, 4, 3), dtype=np.uint8)
        with patch("snake_env.view.cv2.imshow") as imshow:
            present(frame, "Snake")
        imshow.assert_called_once_with("Snake", frame)
