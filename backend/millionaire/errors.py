# millionaire/errors.py


class GameError(Exception):
    pass


class InvalidStateError(GameError):
    """Operation attempted on a game that is already finished."""


class InvalidInputError(GameError):
    """Malformed answer letter or unknown help type."""


class AlreadyUsedError(GameError):
    """The requested help was already consumed in this game."""


class PreconditionError(GameError):
    """Cash-out requested before the first question was answered."""
