"""Exceptions raised by the poker engine."""


class PokerEngineError(ValueError):
    """Base class for all engine errors."""


class ParseError(PokerEngineError):
    """A card string could not be parsed."""


class InvalidInputError(PokerEngineError):
    """An engine call was made with structurally invalid arguments.

    Examples: evaluating fewer than 5 cards, counting outs on a board that
    is not a flop or a turn, or simulating equity for fewer than 2 players.
    """
