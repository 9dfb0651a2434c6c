"""Utility modules for the Discord bot."""
from .discord_utils import exception_handler, send_long_message
from .text_utils import split_message, format_book, channel_name_for

__all__ = [
    'exception_handler',
    'send_long_message',
    'split_message',
    'format_book',
    'channel_name_for'
]
