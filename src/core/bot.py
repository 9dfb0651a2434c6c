"""Main Discord bot client and event handlers."""

import logging
import sys

import discord

from core.config import BotConfig, load_config
from core.constants import DEFAULT_LOG_LEVEL, LOG_DATE_FORMAT, LOG_FORMAT
from core.exceptions import ConfigError
from services.provisioner import run_provisioning_pass
from utils.discord_utils import exception_handler

logger = logging.getLogger(__name__)


class ScriptureBot(discord.Client):
    """Discord client that provisions book channels in every guild it joins."""

    def __init__(self, config: BotConfig):
        intents = discord.Intents.default()
        super().__init__(intents=intents)

        self.config = config

    async def on_ready(self):
        """Called when the bot is ready."""
        logger.info(f"Bot is ready! Logged in as {self.user}")
        logger.info(f"Bot is in {len(self.guilds)} guilds")
        for guild in self.guilds:
            logger.info(f"{guild.name} (id: {guild.id})")

    @exception_handler
    async def on_guild_join(self, guild: discord.Guild):
        """Provision channels for a guild the bot was just added to."""
        logger.info(f"Joined guild: {guild.name} ({guild.id})")
        await run_provisioning_pass(guild, self.config)


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        level=level,
        force=True,
    )


def run_bot() -> int:
    """Run the Discord bot. Returns the process exit status."""
    setup_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    setup_logging(config.log_level)
    bot = ScriptureBot(config)

    try:
        # Route discord.py logs through our root handler
        bot.run(config.token, log_handler=None)
    except discord.LoginFailure:
        logger.error("Failed to login - invalid bot token")
        return 1
    finally:
        logger.info("Bot run finished")

    return 0


if __name__ == "__main__":
    sys.exit(run_bot())
