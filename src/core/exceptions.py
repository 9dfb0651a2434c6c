"""Error kinds raised by the scripture bot."""


class ScriptureBotError(Exception):
    """Base class for all bot errors."""


class ConfigError(ScriptureBotError):
    """Required configuration is missing or invalid. Fatal at startup."""


class DataFormatError(ScriptureBotError):
    """The verse document could not be read or decoded."""


class PlatformError(ScriptureBotError):
    """A call to the chat platform failed."""
