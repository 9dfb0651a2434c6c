"""Discord utility functions."""

import asyncio
import functools
import logging
from typing import Awaitable, Callable, List, Optional, Tuple, TypeVar

import aiohttp
import discord

from core.constants import EVERYONE_ROLE_NAME
from core.exceptions import PlatformError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def exception_handler(func: Callable) -> Callable:
    """Decorator to log exceptions escaping Discord event handlers."""

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except Exception:
            logger.exception(f"Error in {func.__name__}")

    return wrapper


async def platform_call(action: str, call: Awaitable[T]) -> T:
    """
    Await a Discord API call, turning HTTP and network failures into PlatformError.

    Args:
        action: Short description used in the error message
        call: The pending API call
    """
    try:
        return await call
    except (discord.HTTPException, aiohttp.ClientError, OSError, asyncio.TimeoutError) as e:
        raise PlatformError(f"Failed to {action}: {e}") from e


def find_default_role(roles: List[discord.Role]) -> Optional[discord.Role]:
    """Return the guild's @everyone role from a role list."""
    for role in roles:
        if role.is_default() or role.name == EVERYONE_ROLE_NAME:
            return role
    return None


def read_only_overwrite() -> discord.PermissionOverwrite:
    """Overwrite letting a role read a channel and its history but not post."""
    return discord.PermissionOverwrite(
        view_channel=True,
        read_message_history=True,
        send_messages=False,
        manage_messages=False,
    )


async def send_long_message(
    channel: discord.TextChannel, chunks: List[str], label: str = ""
) -> Tuple[int, int]:
    """
    Send pre-split chunks to a channel one at a time, in order.

    A chunk that fails to send is logged and skipped; the rest are still
    sent. Whitespace-only chunks are not sent since Discord rejects them.

    Args:
        channel: Discord channel to send to
        chunks: Message contents
        label: Name used in log lines

    Returns:
        Number of chunks sent and number that failed
    """
    sent = 0
    failures = 0
    for chunk in chunks:
        if not chunk.strip():
            logger.debug(f"Skipping blank chunk for {label}")
            continue
        try:
            await platform_call(f"send message to {label}", channel.send(chunk))
            sent += 1
        except PlatformError as e:
            logger.warning(f"Warning: {e}")
            failures += 1
    return sent, failures
