"""Round engine, settlement and table session."""

from blackjack.game.events import GameEvent, EventEmitter, EventType
from blackjack.game.state import RoundOutcome, RoundPhase
from blackjack.game.engine import Round, RoundResult
from blackjack.game.settlement import payout_for, settle
from blackjack.game.table import Table

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundOutcome",
    "RoundPhase",
    "Round",
    "RoundResult",
    "payout_for",
    "settle",
    "Table",
]
