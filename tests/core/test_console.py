"""Tests for the console display and input."""

import pytest

from blackjack.console import DEFAULT_PLAYER_NAME, ConsoleDisplay, parse_bet, parse_yes_no
from blackjack.errors import BetParseError, InsufficientFundsError, InvalidInputError
from blackjack.strategy import Action


class TestParseBet:
    @pytest.mark.parametrize("text, expected", [("25", 25), ("$25", 25), (" $7 ", 7), ("100\n", 100)])
    def test_amounts(self, text, expected):
        assert parse_bet(text) == expected

    @pytest.mark.parametrize("text", ["", "0", "$0", "  ", "$"])
    def test_no_bet(self, text):
        assert parse_bet(text) is None

    @pytest.mark.parametrize("text", ["ten", "-5", "2.5", "$$5", "5$"])
    def test_rejects(self, text):
        with pytest.raises(BetParseError):
            parse_bet(text)


class TestParseYesNo:
    @pytest.mark.parametrize("text", ["y", "Yes", " YES "])
    def test_yes(self, text):
        assert parse_yes_no(text) is True

    @pytest.mark.parametrize("text", ["n", "No", "q", "QUIT"])
    def test_no(self, text):
        assert parse_yes_no(text) is False

    def test_rejects(self):
        with pytest.raises(InvalidInputError):
            parse_yes_no("perhaps")


class TestConsoleInput:
    def test_reads_in_order(self, scripted_input):
        source = scripted_input(["", "Ann", "H", "$5", "n"])
        assert source.read_name() == DEFAULT_PLAYER_NAME
        assert source.read_name() == "Ann"
        assert source.read_action() is Action.HIT
        assert source.read_bet(10) == 5
        assert source.read_continue() is False

    def test_bet_capped_by_funds(self, scripted_input):
        source = scripted_input(["$11", "10", ""])
        with pytest.raises(InsufficientFundsError, match="kind of cash"):
            source.read_bet(10)
        assert source.read_bet(10) == 10
        assert source.read_bet(0) is None


def test_display_writes_lines(lines):
    ConsoleDisplay(writer=lines.append).show("hello")
    assert lines == ["hello"]
