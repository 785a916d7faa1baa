"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class DeckExhaustedError(BlackjackError, IndexError):
    """Raised when a card is drawn from an empty deck."""


class InvalidInputError(BlackjackError, ValueError):
    """Raised when text from a player cannot be understood."""


class ActionParseError(InvalidInputError):
    """Raised when text does not name a valid action."""


class BetParseError(InvalidInputError):
    """Raised when text is not an acceptable bet."""


class InsufficientFundsError(BetParseError):
    """Raised when a bet is more than the player has."""
