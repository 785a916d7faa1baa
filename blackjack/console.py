"""Console collaborators: how the engine shows text and reads player decisions."""

from typing import Callable, Protocol

from blackjack.errors import BetParseError, InsufficientFundsError, InvalidInputError
from blackjack.strategy import Action

DEFAULT_PLAYER_NAME = "Player"

_YES = frozenset({"y", "yes"})
_NO = frozenset({"n", "no", "q", "quit"})


class Display(Protocol):
    """Anything that can show a line of text to the table."""

    def show(self, text: str) -> None: ...


class Input(Protocol):
    """Source of human decisions."""

    def read_name(self) -> str: ...

    def read_action(self) -> Action: ...

    def read_bet(self, max_funds: int) -> int | None: ...

    def read_continue(self) -> bool: ...


def parse_bet(text: str) -> int | None:
    """
    Parse a bet amount.

    A leading '$' is allowed. An empty string or zero means no bet.

    Raises:
        BetParseError: If the text is not a whole, non-negative amount
    """
    text = text.strip()
    if text.startswith("$"):
        text = text[1:]
    if text in ("", "0"):
        return None
    if not text.isdecimal():
        raise BetParseError("Didn't catch that")
    return int(text)


def parse_yes_no(text: str) -> bool:
    """Parse a yes/no answer; 'quit' counts as no."""
    normalized = text.strip().lower()
    if normalized in _YES:
        return True
    if normalized in _NO:
        return False
    raise InvalidInputError("Please answer yes (y) or no (n)")


class ConsoleDisplay:
    """Display that writes each line to stdout."""

    def __init__(self, writer: Callable[[str], None] = print) -> None:
        self._writer = writer

    def show(self, text: str) -> None:
        self._writer(text)


class ConsoleInput:
    """
    Input that reads one line per request from the terminal.

    Parsing failures are raised to the caller, which decides whether to
    re-prompt.
    """

    def __init__(self, reader: Callable[[], str] = input) -> None:
        self._reader = reader

    def read_line(self) -> str:
        return self._reader()

    def read_name(self) -> str:
        name = self.read_line().strip()
        return name or DEFAULT_PLAYER_NAME

    def read_action(self) -> Action:
        return Action.parse(self.read_line())

    def read_bet(self, max_funds: int) -> int | None:
        amount = parse_bet(self.read_line())
        if amount is not None and amount > max_funds:
            raise InsufficientFundsError("You don't have that kind of cash!")
        return amount

    def read_continue(self) -> bool:
        return parse_yes_no(self.read_line())
