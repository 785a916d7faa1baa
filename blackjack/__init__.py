"""Blackjack table engine - UI-agnostic core."""

from blackjack.cards import Card, Deck, Rank, Suit, reshuffle_threshold
from blackjack.hand import Hand, is_bust, is_natural, is_soft, raw_value, value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "reshuffle_threshold",
    "Hand",
    "raw_value",
    "is_soft",
    "value",
    "is_natural",
    "is_bust",
]
