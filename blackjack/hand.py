"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator, Sequence

from blackjack.cards import Card


def raw_value(cards: Sequence[Card]) -> int:
    """Sum the fixed point value of every card, counting each Ace as 1."""
    return sum(card.points for card in cards)


def is_soft(raw: int, cards: Sequence[Card]) -> bool:
    """
    Check if a hand is soft.

    A hand is soft when one of its Aces can still be counted as 11
    without busting.

    Args:
        raw: The hand's raw value, as returned by raw_value()
        cards: The cards in the hand
    """
    return raw <= 11 and any(card.is_ace for card in cards)


def value(cards: Sequence[Card]) -> int:
    """Calculate the blackjack value of a hand, counting one Ace as 11 when it fits."""
    raw = raw_value(cards)
    if is_soft(raw, cards):
        return raw + 10
    return raw


def is_natural(cards: Sequence[Card]) -> bool:
    """Check if the hand is a natural (21 with exactly two cards)."""
    return len(cards) == 2 and value(cards) == 21


def is_bust(cards: Sequence[Card]) -> bool:
    """Check if the hand has busted (value > 21)."""
    return value(cards) > 21


@dataclass
class Hand:
    """The cards held by one actor for the duration of a round."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def raw_value(self) -> int:
        return raw_value(self.cards)

    @property
    def value(self) -> int:
        return value(self.cards)

    @property
    def is_soft(self) -> bool:
        return is_soft(raw_value(self.cards), self.cards)

    @property
    def is_natural(self) -> bool:
        return is_natural(self.cards)

    @property
    def is_bust(self) -> bool:
        return is_bust(self.cards)

    @property
    def is_finished(self) -> bool:
        """Check if the hand needs no more decisions (natural or bust)."""
        return self.is_natural or self.is_bust

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self.cards)
        if self.is_bust:
            return f"{cards_str}     Bust!"
        return f"{cards_str}     (value: {self.value})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
