import numpy as np
import cv2

from snake_env.snake import CELL, WINDOW_TITLE

# BGR, as OpenCV expects
BACKGROUND_COLOR = (255, 255, 255)
SNAKE_COLOR = (0, 0, 0)
FOOD_COLOR = (0, 0, 0)


def cell_rect(pos, cell=CELL):
    """Top-left and bottom-right pixel corners of a grid cell (inclusive)."""
    x, y = pos
    return (x * cell, y * cell), (x * cell + cell - 1, y * cell + cell - 1)


def draw_frame(snake, img=None, cell=CELL):
    """
    Rebuild the whole frame for `snake`: background first, then one filled
    square per piece and one for the food. Returns the (H, W, 3) uint8 buffer.
    """
    cols, rows = snake.max
    if img is None or img.shape != (rows * cell, cols * cell, 3):
        img = np.zeros((rows * cell, cols * cell, 3), dtype=np.uint8)
    img[:] = BACKGROUND_COLOR

    # Food
    top_left, bottom_right = cell_rect(snake.food_pos, cell)
    cv2.rectangle(img, top_left, bottom_right, FOOD_COLOR, -1)

    # Snake
    for piece in snake.pieces:
        top_left, bottom_right = cell_rect(piece, cell)
        cv2.rectangle(img, top_left, bottom_right, SNAKE_COLOR, -1)

    return img


def present(frame, window_name=WINDOW_TITLE):
    cv2.imshow(window_name, frame)
