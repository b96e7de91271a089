"""Exceptions raised by the game engine"""


class TetrisError(Exception):
    """Base class for engine failures."""


class ResourceFault(TetrisError):
    """A per-session structure could not be allocated; the session is unusable."""


class PersistenceFault(TetrisError):
    """The high score record could not be read or written."""
