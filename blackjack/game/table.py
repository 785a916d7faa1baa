"""A table session: the same seats playing round after round."""

import logging
from random import Random
from typing import Sequence

from blackjack.actors import BotPlayer, Dealer, HumanPlayer, Player
from blackjack.cards import Deck
from blackjack.console import ConsoleDisplay, Display, Input
from blackjack.errors import DeckExhaustedError
from blackjack.game.engine import Round, RoundResult
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.settlement import settle
from config import TableConfig

logger = logging.getLogger(__name__)


class Table:
    """
    Seats, dealer and deck that persist between rounds.

    Players keep their money from round to round; hands and bets reset
    after every round.
    """

    def __init__(
        self,
        players: Sequence[Player],
        settings: TableConfig | None = None,
        display: Display | None = None,
        events: EventEmitter | None = None,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Initialize a table.

        Args:
            players: Players in seating order
            settings: Table options (uses defaults if not provided)
            display: Where announcements go
            events: Emitter shared by every round at this table
            rng: Random number generator for reproducible shuffles
            deck: Starting deck; a fresh shuffled one is built if omitted
        """
        self.settings = settings or TableConfig()
        self.players = list(players)
        self.display = display or ConsoleDisplay()
        self.events = events or EventEmitter()
        self.dealer = Dealer(self.display)
        self._rng = rng or Random()
        self.deck = deck if deck is not None else self._fresh_deck()
        self.rounds_played = 0

    @classmethod
    def from_config(
        cls,
        settings: TableConfig,
        input_source: Input,
        display: Display | None = None,
        events: EventEmitter | None = None,
        rng: Random | None = None,
    ) -> "Table":
        """Seat the configured humans, asking each for a name, plus the bot if requested."""
        display = display or ConsoleDisplay()
        players: list[Player] = []
        for _ in range(settings.num_players):
            display.show("Input your name (or leave blank to be Player)")
            name = input_source.read_name()
            players.append(HumanPlayer(name, input_source, settings.betting_buyin, display))
        if settings.bot_player:
            players.append(BotPlayer(buy_in=settings.betting_buyin, display=display))
        return cls(players, settings, display, events, rng)

    def _fresh_deck(self) -> Deck:
        deck = Deck.build_shuffled(self.settings.num_decks, self._rng)
        self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(deck))
        return deck

    def _prepare_deck(self) -> None:
        """Swap in a freshly shuffled deck once the cut card is reached."""
        if self.deck.needs_reshuffle(self.settings.num_decks):
            logger.info(
                "%d cards left (threshold %d), reshuffling %d decks",
                len(self.deck),
                self.settings.reshuffle_threshold,
                self.settings.num_decks,
            )
            self.display.show("Shuffling a fresh deck...")
            self.deck = self._fresh_deck()

    def _collect_bets(self) -> None:
        for player in self.players:
            if player.buy_in_if_broke(self.settings.betting_buyin):
                self.events.emit_new(
                    EventType.BUY_IN, player=player.name, amount=self.settings.betting_buyin
                )
            player.set_bet()
            if player.bet is not None:
                self.events.emit_new(EventType.BET_PLACED, player=player.name, amount=player.bet)

    def play_round(self) -> RoundResult:
        """
        Play one full round: buy-ins, bets, deal, play, settle, clean up.

        Raises:
            DeckExhaustedError: If the deck runs out mid-round; bets are
                returned and hands cleared before re-raising
        """
        self.rounds_played += 1
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played)

        self._collect_bets()
        self._prepare_deck()

        game_round = Round(self.players, self.dealer, self.deck, self.display, self.events)
        try:
            result = game_round.play()
        except DeckExhaustedError:
            for player in self.players:
                player.void_bet()
            self._clear_hands()
            raise

        self.deck = result.deck
        for player, outcome in result:
            settle(player, outcome, self.settings.payout_ratio, self.events)
        self._clear_hands()
        return result

    def _clear_hands(self) -> None:
        self.dealer.clear_hand()
        for player in self.players:
            player.clear_hand()
