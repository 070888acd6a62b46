# human_play.py
# -------------------------------------------------------
# Play the snake game with the keyboard in an OpenCV window
#
# Usage: pixel-snake [seed]
#   Arrow keys / WASD: move | SPACE: pause | ESC / q: quit
# -------------------------------------------------------

import sys

import cv2
import numpy as np

from snake_env.snake import (
    ACTION_NAMES, DOWN, LEFT, RIGHT, TICK_MS, UP, WINDOW_TITLE, Snake,
)
from snake_env.view import draw_frame, present

# OpenCV key codes (arrows after & 0xFF) and WASD alternatives
KEY_LEFT, KEY_UP, KEY_RIGHT, KEY_DOWN = 81, 82, 83, 84
KEY_A, KEY_W, KEY_D, KEY_S = ord('a'), ord('w'), ord('d'), ord('s')
KEY_SPACE = ord(' ')
KEY_ESC = 27
KEY_Q = ord('q')

KEYS = {
    KEY_LEFT: LEFT,
    KEY_RIGHT: RIGHT,
    KEY_DOWN: DOWN,
    KEY_UP: UP,
    KEY_A: LEFT,
    KEY_D: RIGHT,
    KEY_S: DOWN,
    KEY_W: UP,
}


def key_to_action(key):
    return KEYS.get(key)


def handle_key(snake, key, paused):
    """Apply one key press. Returns the new paused flag."""
    if key == KEY_SPACE:
        return not paused
    if paused:
        return paused

    action = key_to_action(key)
    if action is not None and snake.turn(action):
        print(ACTION_NAMES[action])
    return paused


def window_closed(window_name):
    return cv2.getWindowProperty(window_name, cv2.WND_PROP_VISIBLE) < 1


def open_window(window_name=WINDOW_TITLE):
    try:
        cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
    except cv2.error as e:
        print(f"Could not create window: {e}", file=sys.stderr)
        sys.exit(1)


def run(seed=None):
    rng = np.random.default_rng(seed)
    snake = Snake.spawn(rng)
    paused = False
    frame = None

    open_window(WINDOW_TITLE)

    # --- Main loop ---
    key = -1
    while True:
        # --- Handle input ---
        if key in (KEY_ESC, KEY_Q):
            break
        paused = handle_key(snake, key, paused)

        # --- Move snake ---
        if not paused:
            snake.move()
            if snake.dead:
                print("You died")
                sys.exit(1)

        # --- Draw frame ---
        frame = draw_frame(snake, frame)
        present(frame, WINDOW_TITLE)

        # --- Wait for next tick ---
        key = cv2.waitKey(TICK_MS) & 0xFF
        if window_closed(WINDOW_TITLE):
            break

    cv2.destroyAllWindows()


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    seed = int(argv[0]) if argv else None
    run(seed)


if __name__ == "__main__":
    main()
