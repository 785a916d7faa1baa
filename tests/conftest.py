"""Pytest fixtures for blackjack table tests."""

from random import Random
from typing import Iterable

import pytest

from blackjack.actors import BotPlayer, Dealer, HumanPlayer
from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.console import ConsoleDisplay, ConsoleInput
from blackjack.game.events import EventEmitter
from blackjack.hand import Hand


def _make_hand(*codes: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    return Hand([Card.from_string(code) for code in codes])


def _stacked_deck(*codes: str, padding: int = 0) -> Deck:
    """
    Build a deck that deals ``codes`` in the order given.

    ``padding`` extra 2♣ cards sit underneath, below everything dealt.
    """
    top = [Card.from_string(code) for code in codes]
    filler = [Card(Rank.TWO, Suit.CLUBS)] * padding
    return Deck(filler + list(reversed(top)))


def _scripted_input(lines: Iterable[str]) -> ConsoleInput:
    """Input that answers each request with the next scripted line."""
    return ConsoleInput(reader=iter(lines).__next__)


def _refusing_input() -> ConsoleInput:
    """Input that fails the test if anything is ever asked."""

    def reader() -> str:
        raise AssertionError("No input should have been requested")

    return ConsoleInput(reader=reader)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def lines():
    """Every line shown to the table during a test."""
    return []


@pytest.fixture
def display(lines):
    """Display that records instead of printing."""
    return ConsoleDisplay(writer=lines.append)


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def dealer(display):
    return Dealer(display)


@pytest.fixture
def bot(display):
    return BotPlayer(display=display)


@pytest.fixture
def make_bot(display):
    """Factory for named bots sharing the recording display."""

    def factory(name: str = "Bot", buy_in: int = 0) -> BotPlayer:
        return BotPlayer(name, buy_in, display)

    return factory


@pytest.fixture
def make_human(display):
    """Factory for humans whose answers are scripted."""

    def factory(*answers: str, name: str = "Player", buy_in: int = 0) -> HumanPlayer:
        return HumanPlayer(name, _scripted_input(answers), buy_in, display)

    return factory


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def natural_hand():
    """A natural (A-K)."""
    return _make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return _make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return _make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return _make_hand("10S", "6H", "KC")


@pytest.fixture
def make_hand():
    """Factory building a hand from card strings."""
    return _make_hand


@pytest.fixture
def stacked_deck():
    """Factory building a deck that deals cards in the order given."""
    return _stacked_deck


@pytest.fixture
def scripted_input():
    """Factory for input answering from a list of lines."""
    return _scripted_input


@pytest.fixture
def refusing_input():
    """Input that fails the test if it is ever read."""
    return _refusing_input()
