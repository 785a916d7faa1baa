"""Round phase and outcome enumerations."""

from enum import Enum, auto


class RoundPhase(Enum):
    """
    Round state machine phases.

    Flow: DEALING → NATURAL_CHECK → PLAYER_TURNS → ALL_FINISHED_CHECK → DEALER_TURN → SHOWDOWN → FINISHED
    """

    # Two cards to everyone, players before the dealer
    DEALING = auto()

    # Dealer natural, or every player natural, ends the round here
    NATURAL_CHECK = auto()

    # Each player in table order
    PLAYER_TURNS = auto()

    # No live hand left to play against the dealer
    ALL_FINISHED_CHECK = auto()

    # Dealer plays
    DEALER_TURN = auto()

    # Compare hands
    SHOWDOWN = auto()

    # Terminal state, outcomes are known
    FINISHED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class RoundOutcome(Enum):
    """Result of a round for one player."""

    NATURAL = auto()
    WIN = auto()
    LOSE = auto()
    STANDOFF = auto()

    def __str__(self) -> str:
        return {
            RoundOutcome.NATURAL: "Blackjack! You win!",
            RoundOutcome.WIN: "You win!",
            RoundOutcome.LOSE: "You lose...",
            RoundOutcome.STANDOFF: "Stand-off.",
        }[self]


# Round transitions as (trigger, source, destination)
ROUND_TRANSITIONS: list[tuple[str, RoundPhase, RoundPhase]] = [
    ("cards_dealt", RoundPhase.DEALING, RoundPhase.NATURAL_CHECK),
    ("natural_ends_round", RoundPhase.NATURAL_CHECK, RoundPhase.FINISHED),
    ("no_deciding_natural", RoundPhase.NATURAL_CHECK, RoundPhase.PLAYER_TURNS),
    ("players_done", RoundPhase.PLAYER_TURNS, RoundPhase.ALL_FINISHED_CHECK),
    ("no_live_hands", RoundPhase.ALL_FINISHED_CHECK, RoundPhase.FINISHED),
    ("live_hands_remain", RoundPhase.ALL_FINISHED_CHECK, RoundPhase.DEALER_TURN),
    ("dealer_went_bust", RoundPhase.DEALER_TURN, RoundPhase.FINISHED),
    ("dealer_stood", RoundPhase.DEALER_TURN, RoundPhase.SHOWDOWN),
    ("hands_compared", RoundPhase.SHOWDOWN, RoundPhase.FINISHED),
]

# Valid state transitions
VALID_TRANSITIONS: dict[RoundPhase, list[RoundPhase]] = {
    phase: [dest for _, source, dest in ROUND_TRANSITIONS if source is phase]
    for phase in RoundPhase
}


def is_valid_transition(from_phase: RoundPhase, to_phase: RoundPhase) -> bool:
    """
    Check if a phase transition is valid.

    Args:
        from_phase: Current phase
        to_phase: Desired phase

    Returns:
        True if the transition is allowed
    """
    return to_phase in VALID_TRANSITIONS.get(from_phase, [])
