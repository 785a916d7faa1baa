"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field

from blackjack.cards import reshuffle_threshold

# Environment variables read for table options, with their fallbacks
TABLE_ENV_DEFAULTS = {
    "BLACKJACK_NUM_PLAYERS": "1",
    "BLACKJACK_BOT_PLAYER": "false",
    # Six decks makes the most common 312 card shoe
    "BLACKJACK_NUM_DECKS": "6",
    # 0 disables betting for newly seated players
    "BLACKJACK_BUYIN": "100",
    # Payout for a natural (3:2 = 1.5, 6:5 = 1.2)
    "BLACKJACK_PAYOUT_RATIO": "1.5",
}


def env_setting(name: str) -> str:
    """Raw, unparsed value of a table option from the environment."""
    return os.getenv(name, TABLE_ENV_DEFAULTS[name])


def env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class TableConfig:
    """
    Table options for a session.

    Validated on creation so that no round ever starts with a
    nonsensical setup.
    """

    num_players: int = field(
        default_factory=lambda: int(env_setting("BLACKJACK_NUM_PLAYERS"))
    )
    bot_player: bool = field(
        default_factory=lambda: env_bool("BLACKJACK_BOT_PLAYER")
    )
    num_decks: int = field(
        default_factory=lambda: int(env_setting("BLACKJACK_NUM_DECKS"))
    )
    betting_buyin: int = field(
        default_factory=lambda: int(env_setting("BLACKJACK_BUYIN"))
    )
    payout_ratio: float = field(
        default_factory=lambda: float(env_setting("BLACKJACK_PAYOUT_RATIO"))
    )

    def __post_init__(self) -> None:
        """Validate option combinations."""
        if self.num_players < 0:
            raise ValueError("num_players cannot be negative")
        if self.num_players == 0 and not self.bot_player:
            raise ValueError("Table needs at least one human player or the bot")
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
        if self.betting_buyin < 0:
            raise ValueError("betting_buyin cannot be negative")
        if self.payout_ratio <= 0:
            raise ValueError("payout_ratio must be positive")

    @property
    def reshuffle_threshold(self) -> int:
        """Cards left in the deck at which a fresh one is shuffled in."""
        return reshuffle_threshold(self.num_decks)

    @property
    def betting_enabled(self) -> bool:
        return self.betting_buyin > 0


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: env_bool("DEBUG"))
    log_level: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_LOG_LEVEL", "WARNING").upper()
    )
    # Fixed shuffle seed for reproducible sessions, unset for a random one
    seed: int | None = field(
        default_factory=lambda: (
            int(os.environ["BLACKJACK_SEED"]) if os.getenv("BLACKJACK_SEED") else None
        )
    )

    @property
    def logging_level(self) -> int:
        """Numeric logging level, DEBUG whenever debug mode is on."""
        if self.debug:
            return logging.DEBUG
        level = getattr(logging, self.log_level, None)
        return level if isinstance(level, int) else logging.WARNING

