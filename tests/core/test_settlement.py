"""Tests for paying out bets."""

import pytest

from blackjack.game import EventType, RoundOutcome, payout_for, settle


class TestPayoutFor:
    @pytest.mark.parametrize(
        "outcome, expected",
        [
            (RoundOutcome.NATURAL, 25),
            (RoundOutcome.WIN, 20),
            (RoundOutcome.STANDOFF, 10),
            (RoundOutcome.LOSE, 0),
        ],
    )
    def test_ten_dollar_bet_at_three_to_two(self, outcome, expected):
        assert payout_for(outcome, 10, 1.5) == expected

    def test_natural_rounds_down(self):
        # 1.5 * 5 = 7.5, the half dollar stays with the house
        assert payout_for(RoundOutcome.NATURAL, 5, 1.5) == 12

    def test_six_to_five(self):
        assert payout_for(RoundOutcome.NATURAL, 10, 1.2) == 22


class TestSettle:
    @pytest.fixture
    def better(self, make_bot):
        """A bot with $10 riding and $90 behind."""
        bot = make_bot(buy_in=100)
        bot.place_bet(10)
        return bot

    def test_natural_credits_winnings(self, better, lines):
        assert settle(better, RoundOutcome.NATURAL, 1.5) == 25
        assert better.money == 115
        assert better.bet is None
        assert "Bot: Blackjack! You win! You won $25. (Total cash: $115)" in lines

    def test_win_pays_even_money(self, better):
        assert settle(better, RoundOutcome.WIN, 1.5) == 20
        assert better.money == 110

    def test_standoff_returns_bet(self, better, lines):
        assert settle(better, RoundOutcome.STANDOFF, 1.5) == 10
        assert better.money == 100
        assert "Bot: Stand-off. You kept your original $10 bet (Total cash: $100)" in lines

    def test_lose_forfeits_bet(self, better, lines):
        assert settle(better, RoundOutcome.LOSE, 1.5) == 0
        assert better.money == 90
        assert better.bet is None
        assert "Bot: You lose... You lost your $10 bet. (Total cash: $90)" in lines

    def test_hand_cleared(self, better, make_hand):
        for card in make_hand("AS", "KH"):
            better.receive(card)
        settle(better, RoundOutcome.NATURAL, 1.5)
        assert len(better.hand) == 0

    def test_no_bet_only_announces(self, make_bot, lines, make_hand):
        bot = make_bot(buy_in=0)
        for card in make_hand("10S", "9H"):
            bot.receive(card)
        assert settle(bot, RoundOutcome.WIN, 1.5) == 0
        assert bot.money is None
        assert lines == ["Bot: You win!"]
        assert len(bot.hand) == 0

    def test_sitting_out_keeps_money(self, make_bot):
        bot = make_bot(buy_in=50)
        bot.set_bet()
        settle(bot, RoundOutcome.NATURAL, 1.5)
        assert bot.money == 50

    def test_emits_bet_resolved(self, better, events):
        settle(better, RoundOutcome.WIN, 1.5, events)
        (event,) = events.history
        assert event.event_type is EventType.BET_RESOLVED
        assert event.data["winnings"] == 20
        assert event.data["money"] == 110
