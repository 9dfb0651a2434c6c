"""Text processing utilities for the scripture bot."""
from typing import List, TYPE_CHECKING

from core.constants import (
    CHANNEL_NAME_MAX_LENGTH,
    CHANNEL_NAME_SEPARATOR,
    MESSAGE_MAX_LENGTH,
)

if TYPE_CHECKING:
    from services.data_service import Book


def format_book(book: "Book") -> str:
    """Render a book as one "chapter:verse text" line per verse."""
    return "".join(
        f"{verse.chapter}:{verse.verse_number} {verse.text}\n" for verse in book.verses
    )


def split_message(content: str, max_length: int = MESSAGE_MAX_LENGTH) -> List[str]:
    """
    Split content into chunks of at most max_length characters.

    Each chunk ends just before the last newline inside the window. That
    newline stays at the front of the next chunk, so joining the chunks gives
    back the original content. A window with no usable newline is cut at
    max_length.

    Args:
        content: Text to split
        max_length: Maximum length per chunk, at least 1

    Returns:
        List of non-empty text chunks, empty if content is empty
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    chunks = []
    remaining = content
    while len(remaining) > max_length:
        # a newline at index 0 would produce an empty chunk
        split_at = remaining.rfind("\n", 1, max_length)
        if split_at == -1:
            split_at = max_length
        chunks.append(remaining[:split_at])
        remaining = remaining[split_at:]

    if remaining:
        chunks.append(remaining)

    return chunks


def channel_name_for(book_name: str, max_length: int = CHANNEL_NAME_MAX_LENGTH) -> str:
    """Derive a channel name: lower-cased, spaces to dashes, truncated."""
    name = book_name.lower().replace(" ", CHANNEL_NAME_SEPARATOR)
    return name[:max_length]
