"""Abstract base class for blackjack actors."""

from abc import ABC, abstractmethod

from blackjack.cards import Card, Deck
from blackjack.console import ConsoleDisplay, Display
from blackjack.hand import Hand
from blackjack.strategy import Action


class Actor(ABC):
    """
    Abstract base class for anyone holding a hand at the table.

    Actors decide whether to hit or stand and own their hand. The deck
    belongs to the round; it is only lent to an actor while applying an
    action.
    """

    def __init__(self, name: str, display: Display | None = None) -> None:
        self.name = name
        self.hand = Hand()
        self._display = display or ConsoleDisplay()

    def receive(self, card: Card) -> None:
        """Add a dealt card to this actor's hand."""
        self.hand.add_card(card)

    def clear_hand(self) -> None:
        """Empty the hand for the next round."""
        self.hand.clear()

    def show(self, text: str) -> None:
        """Show a line of text through this actor's display."""
        self._display.show(text)

    @abstractmethod
    def display(self) -> None:
        """Show the actor's hand as the table should see it."""
        ...

    @abstractmethod
    def decide(self, upcard: Card | None = None) -> Action:
        """
        Choose the next action.

        Args:
            upcard: The dealer's face-up card (ignored by the dealer)
        """
        ...

    def apply(self, action: Action, deck: Deck) -> Card | None:
        """
        Carry out an action.

        Hitting draws exactly one card from the deck; standing changes
        nothing.

        Returns:
            The card drawn, or None when standing

        Raises:
            DeckExhaustedError: If the deck is empty
        """
        if action is Action.STAND:
            return None
        card = deck.draw()
        self.show(f"Hit! NEW CARD: {card}")
        self.receive(card)
        return card

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.hand!r})"
