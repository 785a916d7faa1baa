"""The house dealer."""

from blackjack.actors.base import Actor
from blackjack.cards import Card
from blackjack.console import Display
from blackjack.strategy import Action, dealer_action

HIDDEN_CARD = "**"


class Dealer(Actor):
    """
    Dealer with the fixed house policy.

    The dealer never bets, and its first card stays face down until
    the reveal.
    """

    def __init__(self, display: Display | None = None) -> None:
        super().__init__("Dealer", display)

    @property
    def upcard(self) -> Card:
        """The face-up card players decide against."""
        return self.hand[1]

    def display(self) -> None:
        shown = [HIDDEN_CARD] + [str(card) for card in self.hand.cards[1:]]
        self.show(f"Dealer's Cards: {', '.join(shown)}")

    def reveal(self) -> None:
        """Show every card, including the hole card, and the hand's value."""
        self.show(f"Dealer's Cards: {self.hand}")

    def decide(self, upcard: Card | None = None) -> Action:
        return dealer_action(self.hand)
