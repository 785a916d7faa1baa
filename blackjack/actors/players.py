"""Players seated at the table: money and bets on top of a hand."""

from abc import abstractmethod

from blackjack.actors.base import Actor
from blackjack.cards import Card
from blackjack.console import Display, Input
from blackjack.errors import ActionParseError, BetParseError, InsufficientFundsError
from blackjack.strategy import ACTION_PROMPT, Action, bot_action


class Player(Actor):
    """
    A betting seat.

    ``money`` is None for a player who is not betting this session; it
    stays None for good. Zero money means the player is broke and is
    bought back in before the next round. ``bet`` is None whenever no
    bet is riding on the current round.
    """

    def __init__(self, name: str, buy_in: int = 0, display: Display | None = None) -> None:
        super().__init__(name, display)
        if buy_in < 0:
            raise ValueError("buy_in cannot be negative")
        self.money: int | None = buy_in if buy_in > 0 else None
        self.bet: int | None = None

    @property
    def is_betting(self) -> bool:
        """Check if a bet is riding on the current round."""
        return self.bet is not None

    def display(self) -> None:
        self.show(f"{self.name}'s Cards: {self.hand}")

    @abstractmethod
    def set_bet(self) -> None:
        """Put money aside for the coming round, if this player wants to bet."""
        ...

    def place_bet(self, amount: int | None) -> None:
        """
        Move ``amount`` from money to the current bet.

        A missing, zero or negative amount means sitting the round out.

        Raises:
            ValueError: If the player has no money or too little of it
        """
        if amount is None or amount <= 0:
            self.bet = None
            return
        if self.money is None or amount > self.money:
            raise ValueError(f"Cannot bet {amount} with funds {self.money}")
        self.money -= amount
        self.bet = amount

    def buy_in_if_broke(self, amount: int) -> bool:
        """
        Replenish money, but only when it is exactly zero.

        Returns:
            True if the player was bought back in
        """
        if self.money != 0:
            return False
        self.show(f"You went broke, {self.name}! Don't worry, I'll spot you some cash.")
        self.money = amount
        return True

    def collect(self, amount: int) -> None:
        """Credit winnings (or a returned bet) to money."""
        if self.money is None:
            raise ValueError(f"{self.name} is not playing for money")
        self.money += amount

    def clear_bet(self) -> None:
        self.bet = None

    def void_bet(self) -> None:
        """Hand the current bet back untouched, as if the round never happened."""
        if self.bet is not None:
            self.collect(self.bet)
            self.bet = None


class HumanPlayer(Player):
    """A player whose decisions come from a person at the keyboard."""

    def __init__(
        self,
        name: str,
        input_source: Input,
        buy_in: int = 0,
        display: Display | None = None,
    ) -> None:
        super().__init__(name, buy_in, display)
        self._input = input_source

    def set_bet(self) -> None:
        if self.money is None:
            return

        funds = self.money
        self.show(f"What would you like to bet this round, {self.name}? (Funds: ${funds})")
        while True:
            try:
                amount = self._input.read_bet(funds)
            except InsufficientFundsError as e:
                self.show(str(e))
                continue
            except BetParseError as e:
                self.show(f"{e}, try again.")
                continue

            if amount is None or amount <= 0:
                self.show("Not betting this round.")
                self.place_bet(None)
                return

            self.show(f"Betting ${amount}.")
            self.place_bet(amount)
            return

    def decide(self, upcard: Card | None = None) -> Action:
        self.show(ACTION_PROMPT)
        while True:
            try:
                return self._input.read_action()
            except ActionParseError as e:
                self.show(f"{e}, try again.")


class BotPlayer(Player):
    """A player that follows a fixed stand-threshold table and never counts cards."""

    def __init__(self, name: str = "Bot", buy_in: int = 0, display: Display | None = None) -> None:
        super().__init__(name, buy_in, display)

    def set_bet(self) -> None:
        # Bots sit every round out.
        self.place_bet(None)

    def decide(self, upcard: Card | None = None) -> Action:
        if upcard is None:
            raise ValueError("BotPlayer needs the dealer's upcard to decide")
        return bot_action(self.hand, upcard)
