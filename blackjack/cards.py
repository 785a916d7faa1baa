"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterable, Iterator

from blackjack.errors import DeckExhaustedError


class Suit(Enum):
    """Card suits."""

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks in deck order, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def points(self) -> int:
        """Return the fixed point value (Ace = 1, face cards = 10)."""
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


STANDARD_DECK_COUNT = len(Suit) * len(Rank)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def points(self) -> int:
        """Return the fixed point value of the card."""
        return self.rank.points

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {suit.value: suit for suit in Suit}
        suit_map.update({str(suit): suit for suit in Suit})

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def reshuffle_threshold(num_decks: int) -> int:
    """
    Return the remaining-card count at or below which a deck must be replaced.

    Acts like the plastic cut card in a casino shoe: once the deck has been
    dealt down to this many cards, a freshly shuffled one is used for the
    next round.
    """
    return max(40, num_decks * STANDARD_DECK_COUNT // 5)


class Deck:
    """An ordered pile of cards, dealt from the top."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = list(cards)

    @classmethod
    def standard(cls) -> "Deck":
        """A single 52-card deck in suit then rank order."""
        return cls(Card(rank, suit) for suit in Suit for rank in Rank)

    @classmethod
    def multideck(cls, num_decks: int) -> "Deck":
        """Several standard decks stacked together, unshuffled."""
        if num_decks < 1:
            raise ValueError("Deck must have at least 1 standard deck")
        return cls(
            Card(rank, suit)
            for _ in range(num_decks)
            for suit in Suit
            for rank in Rank
        )

    @classmethod
    def build_shuffled(cls, num_decks: int, rng: Random | None = None) -> "Deck":
        """
        Build a multi-deck and shuffle it.

        Args:
            num_decks: Number of standard decks to combine
            rng: Random number generator for shuffling
        """
        deck = cls.multideck(num_decks)
        deck.shuffle(rng or Random())
        return deck

    def shuffle(self, rng: Random) -> None:
        """Shuffle the remaining cards in place."""
        rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise DeckExhaustedError("Cannot draw from empty deck")
        return self._cards.pop()

    def needs_reshuffle(self, num_decks: int) -> bool:
        """Check if the deck has been dealt down to the cut card."""
        return len(self._cards) <= reshuffle_threshold(num_decks)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck({len(self._cards)} cards)"
