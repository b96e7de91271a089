"""Key mapping and DAS/ARR auto-repeat"""
from typing import List, Optional, Tuple

import pygame

from tetris_config import CONFIG
from tetris_fsm import UserAction

KEYMAP = {
    pygame.K_RETURN: UserAction.Start,
    pygame.K_KP_ENTER: UserAction.Start,
    pygame.K_p: UserAction.Pause,
    pygame.K_ESCAPE: UserAction.Terminate,
    pygame.K_LEFT: UserAction.Left,
    pygame.K_RIGHT: UserAction.Right,
    pygame.K_UP: UserAction.Up,
    pygame.K_DOWN: UserAction.Down,
    pygame.K_SPACE: UserAction.Action,
}


def get_action(key: int) -> Optional[UserAction]:
    return KEYMAP.get(key)


class KeyRepeat:
    """Turns a held key into repeated signals flagged as hold.

    The press itself is reported by the caller as a fresh signal; after
    DAS_MS the held key repeats every ARR_MS (0 => every update).
    """
    def __init__(self):
        self.action: Optional[UserAction] = None
        self.held_ms = 0.0
        self.last = 0.0

    def press(self, action: UserAction):
        self.action = action; self.held_ms = 0.0; self.last = 0.0

    def release(self, action: UserAction):
        if action == self.action:
            self.action = None

    def update(self, dt: float) -> List[Tuple[UserAction, bool]]:
        if self.action is None:
            return []
        self.held_ms += dt
        if self.held_ms < CONFIG["DAS_MS"]:
            return []
        arr = CONFIG["ARR_MS"]
        if arr == 0:
            return [(self.action, True)]
        self.last += dt
        if self.last >= arr:
            self.last = 0.0
            return [(self.action, True)]
        return []
