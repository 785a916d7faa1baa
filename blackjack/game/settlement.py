"""Paying out bets once a round's outcomes are known."""

import logging
import math

from blackjack.actors import Player
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.state import RoundOutcome

logger = logging.getLogger(__name__)


def payout_for(outcome: RoundOutcome, bet: int, payout_ratio: float) -> int:
    """
    Calculate what is credited back to a player for a bet.

    The bet has already left the player's money, so a standoff returns
    it and a loss returns nothing.

    Args:
        outcome: The player's round outcome
        bet: Amount riding on the round
        payout_ratio: House payout for a natural (1.5 for 3:2, 1.2 for 6:5)

    Returns:
        Amount to credit to the player's money
    """
    if outcome is RoundOutcome.NATURAL:
        return bet + math.floor(payout_ratio * bet)
    if outcome is RoundOutcome.WIN:
        return bet + bet
    if outcome is RoundOutcome.STANDOFF:
        return bet
    return 0


def settle(
    player: Player,
    outcome: RoundOutcome,
    payout_ratio: float,
    events: EventEmitter | None = None,
) -> int:
    """
    Announce a player's outcome and pay out any bet.

    Afterwards the bet is cleared and the hand emptied for the next round.

    Returns:
        Amount credited to the player's money
    """
    header = f"{player.name}: {outcome}"

    if player.bet is None:
        player.show(header)
        player.clear_hand()
        return 0

    bet = player.bet
    winnings = payout_for(outcome, bet, payout_ratio)
    player.collect(winnings)

    if outcome is RoundOutcome.STANDOFF:
        player.show(f"{header} You kept your original ${bet} bet (Total cash: ${player.money})")
    elif outcome is RoundOutcome.LOSE:
        player.show(f"{header} You lost your ${bet} bet. (Total cash: ${player.money})")
    else:
        player.show(f"{header} You won ${winnings}. (Total cash: ${player.money})")

    logger.debug("%s bet %d, outcome %s, credited %d", player.name, bet, outcome.name, winnings)
    if events is not None:
        events.emit_new(
            EventType.BET_RESOLVED,
            player=player.name,
            bet=bet,
            outcome=outcome.name,
            winnings=winnings,
            money=player.money,
        )

    player.clear_bet()
    player.clear_hand()
    return winnings
