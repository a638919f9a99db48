"""Exceptions raised by map generation and the world state."""


class RoguemapError(RuntimeError):
    """Base class for recoverable-by-caller map errors."""


class NoRoomsError(RoguemapError):
    """
    Raised when a caller needs a room (e.g. to place the player) but the
    generator accepted none.

    Under-filled maps are legal, so anything that reads rooms[0] must check
    first and raise this rather than index blindly.
    """
