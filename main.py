import logging
import sys

import pygame

from tetris_config import CONFIG
from tetris_fsm import Controller, UserAction
from tetris_input import KeyRepeat, get_action
from tetris_layout import compute_dims
from tetris_render import RenderAssets
from tetris_session import State
from tetris_storage import FileHighScoreStore

REPEATABLE = (UserAction.Left, UserAction.Right, UserAction.Down)


def tick_interval(speed):
    base, step = CONFIG["BASE_TICK_MS"], CONFIG["TICK_STEP_MS"]
    return max(CONFIG["MIN_TICK_MS"], base - (speed - 1) * step)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("Brick Game — Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 36)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    controller = Controller(FileHighScoreStore(CONFIG["HIGH_SCORE_FILE"]), seed=CONFIG["SEED"])
    repeat = KeyRepeat()
    acc = 0
    info = controller.snapshot()

    while True:
        dt = clock.tick(60)
        acc += dt

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                action = get_action(e.key)
                if action is None:
                    continue
                if action == UserAction.Terminate and controller.state == State.GAMEOVER:
                    pygame.quit(); sys.exit()
                info = controller.user_input(action)
                if action in REPEATABLE:
                    repeat.press(action)
                if action == UserAction.Start:
                    acc = 0
            if e.type == pygame.KEYUP:
                action = get_action(e.key)
                if action is not None:
                    repeat.release(action)

        for action, hold in repeat.update(dt):
            info = controller.user_input(action, hold)

        # Intermediate states advance on the next frame; falling waits for gravity
        state = controller.state
        if state in (State.SPAWN, State.SHIFTING, State.ATTACHING):
            info = controller.tick()
        elif state == State.MOVING and acc >= tick_interval(info.speed):
            acc = 0
            info = controller.tick()

        render.draw(screen, info)
        pygame.display.flip()


if __name__ == '__main__':
    main()
