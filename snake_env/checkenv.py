from gymnasium.utils.env_checker import check_env

from snake_env.snakeenv import SnakeEnv


def main():
    env = SnakeEnv()
    check_env(env)
    env.close()
    print("SnakeEnv passed the Gymnasium env checker")


if __name__ == "__main__":
    main()
