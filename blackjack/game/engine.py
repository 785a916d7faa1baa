"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass
from typing import Iterator, Sequence

from transitions import Machine

from blackjack.actors import Actor, Dealer, Player
from blackjack.cards import Card, Deck
from blackjack.console import ConsoleDisplay, Display
from blackjack.errors import DeckExhaustedError
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.state import ROUND_TRANSITIONS, RoundOutcome, RoundPhase
from blackjack.strategy import Action

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a finished round, one per player in table order."""

    players: tuple[Player, ...]
    outcomes: tuple[RoundOutcome, ...]
    deck: Deck
    ended_in: RoundPhase

    def outcome_for(self, player: Player) -> RoundOutcome:
        """Look up one player's outcome."""
        for seated, outcome in self:
            if seated is player:
                return outcome
        raise KeyError(player.name)

    def __iter__(self) -> Iterator[tuple[Player, RoundOutcome]]:
        return zip(self.players, self.outcomes)

    def __len__(self) -> int:
        return len(self.outcomes)


class Round:
    """
    One round of blackjack driven by a state machine.

    Each call to advance() runs exactly one phase and moves to the next.
    The round borrows the deck for its lifetime and hands back whatever
    is left in the result.
    """

    # State machine states
    STATES = [p.name.lower() for p in RoundPhase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": trigger, "source": source.name.lower(), "dest": dest.name.lower()}
        for trigger, source, dest in ROUND_TRANSITIONS
    ]

    _HANDLERS = {
        RoundPhase.DEALING: "_deal",
        RoundPhase.NATURAL_CHECK: "_check_naturals",
        RoundPhase.PLAYER_TURNS: "_play_players",
        RoundPhase.ALL_FINISHED_CHECK: "_check_all_finished",
        RoundPhase.DEALER_TURN: "_play_dealer",
        RoundPhase.SHOWDOWN: "_showdown",
    }

    def __init__(
        self,
        players: Sequence[Player],
        dealer: Dealer,
        deck: Deck,
        display: Display | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Set up a round that has not been dealt yet.

        Args:
            players: Players in table order; every hand must be empty
            dealer: The dealer; its hand must be empty
            deck: Deck to draw from
            display: Where round announcements go
            events: Emitter for round events
        """
        if any(len(actor.hand) for actor in (*players, dealer)):
            raise ValueError("Every hand must be empty before dealing")

        self.players = tuple(players)
        self.dealer = dealer
        self.deck = deck
        self.display = display or ConsoleDisplay()
        self.events = events or EventEmitter()
        self._outcomes: tuple[RoundOutcome, ...] | None = None
        self._ended_in: RoundPhase | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_on_phase_change",
        )

    @property
    def phase(self) -> RoundPhase:
        """Get current round phase as enum."""
        return RoundPhase[self._machine_state.upper()]  # type: ignore

    @property
    def done(self) -> bool:
        return self.phase is RoundPhase.FINISHED

    @property
    def result(self) -> RoundResult:
        """The result of a finished round."""
        if self._outcomes is None:
            raise RuntimeError(f"Round is not finished (phase: {self.phase})")
        return RoundResult(
            players=self.players,
            outcomes=self._outcomes,
            deck=self.deck,
            ended_in=self._ended_in,
        )

    def advance(self) -> RoundPhase:
        """
        Run the current phase and move to the next one.

        Returns:
            The phase the round is in afterwards

        Raises:
            DeckExhaustedError: If a card is needed and the deck is empty
        """
        phase = self.phase
        if phase is RoundPhase.FINISHED:
            return phase

        handler = getattr(self, self._HANDLERS[phase])
        try:
            handler()
        except DeckExhaustedError:
            logger.error(
                "Deck ran out during %s with %d players seated; round abandoned",
                phase,
                len(self.players),
            )
            self.events.emit_new(EventType.ROUND_ABORTED, phase=phase.name, reason="deck exhausted")
            raise
        return self.phase

    def play(self) -> RoundResult:
        """Advance until the round is finished."""
        while not self.done:
            self.advance()
        return self.result

    def _on_phase_change(self) -> None:
        logger.debug("Round entered %s", self.phase)
        self.events.emit_new(EventType.PHASE_CHANGED, phase=self.phase.name)

    def _finish(self, outcomes: Sequence[RoundOutcome], trigger: str) -> None:
        """Record one outcome per player and fire the trigger that ends the round."""
        if self._outcomes is not None:
            raise RuntimeError("Round outcomes were already recorded")
        if len(outcomes) != len(self.players):
            raise RuntimeError("Exactly one outcome is needed per player")

        self._outcomes = tuple(outcomes)
        self._ended_in = self.phase
        for player, outcome in zip(self.players, self._outcomes):
            self.events.emit_new(EventType.PLAYER_OUTCOME, player=player.name, outcome=outcome.name)
        self.events.emit_new(EventType.ROUND_ENDED, ended_in=self._ended_in.name)
        getattr(self, trigger)()

    def _deal_card(self, actor: Actor, face_up: bool = True) -> Card:
        card = self.deck.draw()
        actor.receive(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            to=actor.name,
        )
        return card

    def _deal(self) -> None:
        """Two passes: one card to each player in order, then one to the dealer."""
        for pass_number in range(2):
            for player in self.players:
                self._deal_card(player)
            self._deal_card(self.dealer, face_up=pass_number > 0)
        self.cards_dealt()

    def _check_naturals(self) -> None:
        if self.dealer.hand.is_natural:
            self.dealer.reveal()
            self.display.show("Dealer has blackjack!")
            self.events.emit_new(EventType.DEALER_NATURAL)
            outcomes = []
            for player in self.players:
                player.display()
                if player.hand.is_natural:
                    outcomes.append(RoundOutcome.STANDOFF)
                else:
                    outcomes.append(RoundOutcome.LOSE)
            self._finish(outcomes, "natural_ends_round")
            return

        if self.players and all(player.hand.is_natural for player in self.players):
            # The dealer has no natural, so nobody can tie
            self.dealer.reveal()
            for player in self.players:
                player.display()
                self.events.emit_new(EventType.PLAYER_NATURAL, player=player.name)
            self._finish([RoundOutcome.WIN] * len(self.players), "natural_ends_round")
            return

        self.no_deciding_natural()

    def _play_players(self) -> None:
        upcard = self.dealer.upcard
        for player in self.players:
            if player.hand.is_natural:
                player.display()
                self.display.show("Blackjack!")
                self.events.emit_new(EventType.PLAYER_NATURAL, player=player.name)
                continue
            self._play_player(player, upcard)
        self.players_done()

    def _play_player(self, player: Player, upcard: Card) -> None:
        while True:
            self.dealer.display()
            player.display()

            if player.hand.is_bust:
                self.display.show("Bust!")
                self.events.emit_new(EventType.PLAYER_BUSTS, player=player.name)
                return

            action = player.decide(upcard)
            card = player.apply(action, self.deck)
            if action is Action.STAND:
                self.events.emit_new(
                    EventType.PLAYER_STAND, player=player.name, hand_value=player.hand.value
                )
                return

            self.events.emit_new(EventType.PLAYER_HIT, player=player.name, card=str(card))
            self.display.show("")

    def _check_all_finished(self) -> None:
        if all(player.hand.is_finished for player in self.players):
            if not any(player.hand.is_natural for player in self.players):
                self.display.show("House wins!")
            outcomes = [
                RoundOutcome.NATURAL if player.hand.is_natural else RoundOutcome.LOSE
                for player in self.players
            ]
            self._finish(outcomes, "no_live_hands")
            return

        self.live_hands_remain()

    def _play_dealer(self) -> None:
        self.display.show("---Dealer's turn!---")
        self.events.emit_new(EventType.DEALER_REVEALS, hand_value=self.dealer.hand.value)

        while True:
            self.dealer.reveal()

            if self.dealer.hand.is_bust:
                self.display.show("Dealer goes bust!")
                self.events.emit_new(EventType.DEALER_BUSTS)
                outcomes = [
                    RoundOutcome.LOSE if player.hand.is_bust else RoundOutcome.WIN
                    for player in self.players
                ]
                self._finish(outcomes, "dealer_went_bust")
                return

            action = self.dealer.decide()
            card = self.dealer.apply(action, self.deck)
            if action is Action.STAND:
                self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.hand.value)
                break
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))

        self.dealer_stood()

    def _showdown(self) -> None:
        dealer_value = self.dealer.hand.value
        outcomes = []
        for player in self.players:
            player.display()
            hand = player.hand
            if hand.is_natural:
                outcomes.append(RoundOutcome.WIN)
            elif hand.is_bust:
                outcomes.append(RoundOutcome.LOSE)
            elif hand.value > dealer_value:
                outcomes.append(RoundOutcome.WIN)
            elif hand.value < dealer_value:
                outcomes.append(RoundOutcome.LOSE)
            else:
                outcomes.append(RoundOutcome.STANDOFF)
        self._finish(outcomes, "hands_compared")
