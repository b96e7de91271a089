"""Finite state machine driving a game session.

transition() is the full (state, signal) table and has no side effects.
Controller applies the chosen effect to the session it owns; an effect may
redirect the nominal target state (a blocked spawn goes to GAMEOVER, a
landed piece goes to ATTACHING).
"""
import logging
from enum import Enum, IntEnum
from typing import Optional, Tuple

import tetris_moves as moves
from tetris_config import CONFIG
from tetris_errors import PersistenceFault
from tetris_session import GameInfo, Session, State
from tetris_storage import HighScoreStore, MemoryHighScoreStore

log = logging.getLogger(__name__)


class UserAction(IntEnum):
    Start = 0
    Pause = 1
    Terminate = 2
    Left = 3
    Right = 4
    Up = 5
    Down = 6
    Action = 7
    Tick = 8  # periodic gravity step, never produced by a key


class Effect(Enum):
    NONE = "none"
    INIT = "init"
    RESET = "reset"
    TERMINATE = "terminate"
    TOGGLE_PAUSE = "toggle_pause"
    SPAWN = "spawn"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    GRAVITY = "gravity"
    SHIFT = "shift"
    ATTACH = "attach"


PLAYING = (State.SPAWN, State.MOVING, State.SHIFTING, State.ATTACHING)

# Signals that must not fire again while their key stays down
EDGE_TRIGGERED = (UserAction.Start, UserAction.Pause, UserAction.Terminate, UserAction.Action)


def transition(state: State, action: UserAction) -> Tuple[State, Effect]:
    """Return (next state, effect) for every state/signal pair."""
    if action == UserAction.Terminate:
        if state == State.GAMEOVER:
            return State.GAMEOVER, Effect.NONE
        return State.GAMEOVER, Effect.TERMINATE
    if action == UserAction.Start:
        if state == State.START:
            return State.SPAWN, Effect.INIT
        if state == State.GAMEOVER:
            return State.SPAWN, Effect.RESET
        return state, Effect.NONE
    if action == UserAction.Pause:
        if state in PLAYING:
            return state, Effect.TOGGLE_PAUSE
        return state, Effect.NONE

    if state == State.SPAWN:
        if action == UserAction.Tick:
            return State.MOVING, Effect.SPAWN
    elif state == State.MOVING:
        if action == UserAction.Left:
            return State.MOVING, Effect.MOVE_LEFT
        if action == UserAction.Right:
            return State.MOVING, Effect.MOVE_RIGHT
        if action == UserAction.Up:
            return State.MOVING, Effect.ROTATE
        if action == UserAction.Down:
            return State.SHIFTING, Effect.NONE
        if action == UserAction.Action:
            return State.MOVING, Effect.HARD_DROP
        if action == UserAction.Tick:
            return State.MOVING, Effect.GRAVITY
    elif state == State.SHIFTING:
        if action == UserAction.Tick:
            return State.MOVING, Effect.SHIFT
    elif state == State.ATTACHING:
        if action == UserAction.Tick:
            return State.SPAWN, Effect.ATTACH
    return state, Effect.NONE


class Controller:
    """Owns one session at a time and feeds it signals."""

    def __init__(self, store: Optional[HighScoreStore] = None, seed: Optional[int] = None):
        self.store = store if store is not None else MemoryHighScoreStore()
        self.seed = seed if seed is not None else CONFIG["SEED"]
        self.high_score = self._load_high_score()
        # placeholder until Start allocates a real one
        self.session = Session(grid=None, rng=None, next_kind=None, high_score=self.high_score)

    @property
    def state(self) -> State:
        return self.session.state

    # ---------- signal intake ----------
    def user_input(self, action: UserAction, hold: bool = False) -> GameInfo:
        if hold and action in EDGE_TRIGGERED:
            return self.snapshot()
        if self.session.pause and action not in (UserAction.Pause, UserAction.Terminate):
            return self.snapshot()

        state = self.state
        target, effect = transition(state, action)
        if effect is not Effect.NONE or target != state:
            target = self._apply(effect, target)
            self.session.state = target
            log.debug("%s + %s -> %s (%s)", state.name, action.name, target.name, effect.value)
        return self.snapshot()

    def tick(self) -> GameInfo:
        return self.user_input(UserAction.Tick)

    def snapshot(self) -> GameInfo:
        return self.session.snapshot()

    # ---------- effects ----------
    def _apply(self, effect: Effect, target: State) -> State:
        s = self.session
        if effect in (Effect.INIT, Effect.RESET):
            self._start()
        elif effect == Effect.TERMINATE:
            s.release()
            s.pause = False
            log.info("game terminated with score %d", s.score)
        elif effect == Effect.TOGGLE_PAUSE:
            s.pause = not s.pause
        elif effect == Effect.SPAWN:
            if not moves.spawn(s):
                log.info("game over: spawn blocked, score %d", s.score)
                return State.GAMEOVER
        elif effect == Effect.MOVE_LEFT:
            moves.move_left(s)
        elif effect == Effect.MOVE_RIGHT:
            moves.move_right(s)
        elif effect == Effect.ROTATE:
            moves.rotate(s)
        elif effect == Effect.HARD_DROP:
            moves.hard_drop(s)
            return State.ATTACHING
        elif effect == Effect.GRAVITY:
            if moves.is_attach(s):
                return State.ATTACHING
            moves.shift(s)
        elif effect == Effect.SHIFT:
            moves.shift(s)
            if moves.is_attach(s):
                return State.ATTACHING
        elif effect == Effect.ATTACH:
            moves.attach(s)
            self._score(moves.clear_lines(s))
        return target

    def _start(self) -> None:
        # build the new session fully before dropping the old one
        session = Session.create(high_score=max(self._load_high_score(), self.high_score),
                                 seed=self.seed)
        if not self.session.released:
            self.session.release()
        self.session = session
        self.high_score = session.high_score
        log.info("session started, high score %d", session.high_score)

    def _score(self, lines: int) -> None:
        s = self.session
        if not lines:
            return
        s.add_lines(lines)
        if s.score > s.high_score:
            s.high_score = self.high_score = s.score
            log.info("new high score %d", s.score)
            self._save_high_score(s.score)

    def _load_high_score(self) -> int:
        try:
            return self.store.load_high_score()
        except PersistenceFault as exc:
            log.warning("high score unavailable, using 0: %s", exc)
            return 0

    def _save_high_score(self, score: int) -> None:
        try:
            self.store.save_high_score(score)
        except PersistenceFault as exc:
            log.warning("high score not saved: %s", exc)
