"""Player actions and the fixed decision tables for the dealer and the bot."""

from enum import Enum, auto
from typing import Mapping

from blackjack.cards import Card, Rank
from blackjack.errors import ActionParseError
from blackjack.hand import Hand


class Action(Enum):
    """Possible actor actions."""

    HIT = auto()
    STAND = auto()

    def __str__(self) -> str:
        return self.name.title()

    @classmethod
    def parse(cls, text: str) -> "Action":
        """
        Parse an action typed by a player.

        Accepts the full name or its first letter, in any case.

        Raises:
            ActionParseError: If the text names no action
        """
        normalized = text.strip().lower()
        try:
            return _ACTION_WORDS[normalized]
        except KeyError:
            raise ActionParseError("Invalid action input") from None


ACTION_PROMPT = "Hit (h) or Stand (s)?"

_ACTION_WORDS: Mapping[str, Action] = {
    "hit": Action.HIT,
    "h": Action.HIT,
    "stand": Action.STAND,
    "s": Action.STAND,
}

# Dealer must draw to 16 and stand on all 17s.
DEALER_STAND_VALUE = 17

# Soft hands are hit until they reach this value, whatever the dealer shows.
BOT_SOFT_STAND_VALUE = 18

# Hard stand threshold keyed on the dealer's upcard.
BOT_HARD_STAND_VALUES: Mapping[Rank, int] = {
    # Good upcards for the dealer
    Rank.ACE: 17,
    Rank.SEVEN: 17,
    Rank.EIGHT: 17,
    Rank.NINE: 17,
    Rank.TEN: 17,
    Rank.JACK: 17,
    Rank.QUEEN: 17,
    Rank.KING: 17,
    # Poor upcards
    Rank.FOUR: 12,
    Rank.FIVE: 12,
    Rank.SIX: 12,
    # Fair upcards
    Rank.TWO: 13,
    Rank.THREE: 13,
}


def dealer_action(hand: Hand) -> Action:
    """Return the dealer's action: stand on 17 or more, otherwise hit."""
    if hand.value >= DEALER_STAND_VALUE:
        return Action.STAND
    return Action.HIT


def bot_stand_threshold(upcard: Card) -> int:
    """Return the hard total at which the bot stands against this upcard."""
    return BOT_HARD_STAND_VALUES[upcard.rank]


def bot_action(hand: Hand, upcard: Card) -> Action:
    """
    Return the bot's action for its hand against the dealer's upcard.

    Soft hands hit until 18. Hard hands stand once they reach the
    threshold for the upcard.
    """
    if hand.is_soft:
        stop_at = BOT_SOFT_STAND_VALUE
    else:
        stop_at = bot_stand_threshold(upcard)

    if hand.value >= stop_at:
        return Action.STAND
    return Action.HIT
