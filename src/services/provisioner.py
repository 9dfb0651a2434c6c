"""Server provisioning: one read-only channel per book, filled with its text.

A provisioning pass runs sequentially. Books are handled one at a time and
messages inside a book are sent in order. A failure on one book (channel
creation, permissions) or one message is logged and skipped. Only a failure
to resolve the guild's default role aborts the pass, before any channel is
created.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional

import discord

from core.config import BotConfig
from core.constants import MESSAGE_MAX_LENGTH
from core.exceptions import DataFormatError, PlatformError
from services.data_service import Book, DataService
from utils.discord_utils import (
    find_default_role,
    platform_call,
    read_only_overwrite,
    send_long_message,
)
from utils.text_utils import channel_name_for, format_book, split_message

logger = logging.getLogger(__name__)


@dataclass
class ProvisionReport:
    """Outcome of one provisioning pass."""

    channels_created: int = 0
    messages_sent: int = 0
    skipped_steps: int = 0


class ServerProvisioner:
    """Creates and fills book channels in a single guild."""

    def __init__(self, guild: discord.Guild, message_max_length: int = MESSAGE_MAX_LENGTH):
        self.guild = guild
        self.message_max_length = message_max_length

    async def resolve_default_role(self) -> discord.Role:
        """Fetch the guild's roles and return @everyone.

        Raises:
            PlatformError: If the roles cannot be fetched or @everyone is absent
        """
        roles = await platform_call("get guild roles", self.guild.fetch_roles())
        role = find_default_role(roles)
        if role is None:
            raise PlatformError("could not find @everyone role")
        return role

    async def provision(self, books: List[Book]) -> ProvisionReport:
        """Create a channel for each book and post the book's text into it."""
        report = ProvisionReport()
        if not books:
            return report

        everyone = await self.resolve_default_role()

        for book in books:
            await self._provision_book(book, everyone, report)

        return report

    async def _provision_book(
        self, book: Book, everyone: discord.Role, report: ProvisionReport
    ) -> None:
        channel_name = channel_name_for(book.name)

        try:
            channel = await platform_call(
                f"create channel for {book.name}",
                self.guild.create_text_channel(channel_name),
            )
        except PlatformError as e:
            logger.warning(f"Warning: {e}")
            report.skipped_steps += 1
            return
        report.channels_created += 1

        try:
            await platform_call(
                f"set permissions for {book.name}",
                channel.set_permissions(everyone, overwrite=read_only_overwrite()),
            )
        except PlatformError as e:
            logger.warning(f"Warning: {e}")
            report.skipped_steps += 1

        chunks = split_message(format_book(book), self.message_max_length)
        sent, failed = await send_long_message(channel, chunks, book.name)
        report.messages_sent += sent
        report.skipped_steps += failed
        logger.info(f"Posted {book.name} to #{channel_name} in {sent} messages")


async def run_provisioning_pass(
    guild: discord.Guild, config: BotConfig
) -> Optional[ProvisionReport]:
    """
    Run one full provisioning pass for a guild.

    The verse document is read fresh for each pass, so passes for different
    guilds share no state.

    Returns:
        The pass report, or None if the pass was aborted
    """
    try:
        bible = await asyncio.to_thread(DataService.load_bible, config.data_file)
    except DataFormatError as e:
        logger.error(f"Error loading Bible data: {e}")
        return None

    books = DataService.group_books(bible.verses)
    logger.info(f"Provisioning {len(books)} books in {guild.name} ({guild.id})")

    provisioner = ServerProvisioner(guild, config.message_max_length)
    try:
        report = await provisioner.provision(books)
    except PlatformError as e:
        logger.error(f"Error setting up server: {e}")
        return None

    logger.info(
        f"Server setup completed: {report.channels_created} channels, "
        f"{report.messages_sent} messages, {report.skipped_steps} skipped steps"
    )
    return report
