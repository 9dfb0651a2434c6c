"""Configuration module for the scripture bot."""
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

# Import constants from the constants module
from .constants import *
from .exceptions import ConfigError


@dataclass(frozen=True)
class BotConfig:
    """Settings the bot needs to connect and provision a server."""

    token: str
    data_file: str = DEFAULT_DATA_FILE
    message_max_length: int = MESSAGE_MAX_LENGTH
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_message_max_length(value: Optional[str]) -> int:
    if value is None or not value.strip():
        return MESSAGE_MAX_LENGTH
    try:
        length = int(value)
    except ValueError:
        raise ConfigError(f"MESSAGE_MAX_LENGTH must be an integer, got {value!r}")
    if not 1 <= length <= DISCORD_MESSAGE_LIMIT:
        raise ConfigError(
            f"MESSAGE_MAX_LENGTH must be between 1 and {DISCORD_MESSAGE_LIMIT}, got {length}"
        )
    return length


def _parse_log_level(value: Optional[str]) -> str:
    if value is None or not value.strip():
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Unknown LOG_LEVEL: {value!r}")
    return level


def load_config(env: Optional[Mapping[str, str]] = None) -> BotConfig:
    """
    Build the bot configuration from the environment.

    A local .env file is loaded first when reading the real process
    environment. Variables already set in the environment take precedence.

    Args:
        env: Mapping to read instead of os.environ (skips the .env file)

    Returns:
        The loaded configuration

    Raises:
        ConfigError: If DISCORD_BOT_TOKEN is absent or a value is invalid
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    token = env.get("DISCORD_BOT_TOKEN", "").strip()
    if not token:
        raise ConfigError("DISCORD_BOT_TOKEN environment variable not set")

    data_file = env.get("BIBLE_DATA_FILE", "").strip() or DEFAULT_DATA_FILE

    return BotConfig(
        token=token,
        data_file=data_file,
        message_max_length=_parse_message_max_length(env.get("MESSAGE_MAX_LENGTH")),
        log_level=_parse_log_level(env.get("LOG_LEVEL")),
    )
