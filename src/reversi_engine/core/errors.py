"""Exceptions raised by the rules engine."""


class ReversiError(Exception):
    """Base class for all engine errors."""


class IllegalMoveError(ReversiError, ValueError):
    """Target cell is occupied or the move captures nothing."""


class InvalidCoordinateError(ReversiError, ValueError):
    """Position lies outside the board."""


class InvalidStateTransitionError(ReversiError):
    """Operation is not allowed in the game's current status."""
