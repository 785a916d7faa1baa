"""Everyone seated at the table: the dealer, humans and bots."""

from blackjack.actors.base import Actor
from blackjack.actors.dealer import Dealer
from blackjack.actors.players import BotPlayer, HumanPlayer, Player

__all__ = [
    "Actor",
    "Dealer",
    "Player",
    "HumanPlayer",
    "BotPlayer",
]
