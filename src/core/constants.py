"""Platform limits and defaults for the scripture bot."""

# Discord rejects messages longer than this
DISCORD_MESSAGE_LIMIT = 2000

# Size of each posted chunk of book text
MESSAGE_MAX_LENGTH = 1000

# Discord channel names are capped at 100 characters
CHANNEL_NAME_MAX_LENGTH = 100
CHANNEL_NAME_SEPARATOR = "-"

DEFAULT_DATA_FILE = "net.json"
DEFAULT_LOG_LEVEL = "INFO"

EVERYONE_ROLE_NAME = "@everyone"

LOG_FORMAT = "%(asctime)s,%(msecs)03d %(levelname)-8s [%(filename)s:%(lineno)d] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d:%H:%M:%S"
