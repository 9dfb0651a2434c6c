"""Verse document loading and book grouping."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from core.exceptions import DataFormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VerseRecord:
    """One verse tagged with its book, chapter and verse coordinates."""

    book_name: str
    book_number: int
    chapter: int
    verse_number: int
    text: str


@dataclass
class Book:
    """All verses sharing a book name, in source order."""

    name: str
    verses: List[VerseRecord] = field(default_factory=list)

    @property
    def number(self) -> int:
        """Canonical book number, taken from the first verse."""
        return self.verses[0].book_number


@dataclass(frozen=True)
class BibleData:
    """A decoded verse document."""

    name: str
    verses: List[VerseRecord]


# JSON key -> (VerseRecord field, expected type)
VERSE_FIELDS = {
    "book_name": ("book_name", str),
    "book": ("book_number", int),
    "chapter": ("chapter", int),
    "verse": ("verse_number", int),
    "text": ("text", str),
}


class DataService:
    """Service for reading the verse document and shaping it into books."""

    @staticmethod
    def parse_verse(entry: Any, index: int = 0) -> VerseRecord:
        """
        Decode a single verse entry.

        Args:
            entry: Decoded JSON object for one verse
            index: Position of the entry, used in error messages

        Returns:
            The verse record

        Raises:
            DataFormatError: If a field is missing or has the wrong type
        """
        if not isinstance(entry, dict):
            raise DataFormatError(f"Verse entry {index} is not an object")

        values = {}
        for key, (attr, expected) in VERSE_FIELDS.items():
            if key not in entry:
                raise DataFormatError(f"Verse entry {index} is missing '{key}'")
            value = entry[key]
            # bool is an int subclass but never a valid coordinate
            if isinstance(value, bool) or not isinstance(value, expected):
                raise DataFormatError(
                    f"Verse entry {index} field '{key}' should be {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            values[attr] = value
        return VerseRecord(**values)

    @classmethod
    def parse_document(cls, document: Any) -> BibleData:
        """
        Decode a verse document into its flat, ordered verse list.

        Args:
            document: Decoded JSON with a "metadata" object and a "verses" list

        Returns:
            The translation name and its verses in document order

        Raises:
            DataFormatError: If the document does not have the expected shape
        """
        if not isinstance(document, dict):
            raise DataFormatError("Verse document must be a JSON object")

        metadata = document.get("metadata", {})
        if not isinstance(metadata, dict):
            raise DataFormatError("'metadata' must be an object")
        name = metadata.get("name", "")
        if not isinstance(name, str):
            raise DataFormatError("'metadata.name' must be a string")

        entries = document.get("verses")
        if not isinstance(entries, list):
            raise DataFormatError("Verse document has no 'verses' list")

        verses = [cls.parse_verse(entry, i) for i, entry in enumerate(entries)]
        return BibleData(name=name, verses=verses)

    @classmethod
    def load_bible(cls, file_path: str) -> BibleData:
        """
        Load and decode a verse document from disk.

        Raises:
            DataFormatError: If the file cannot be read or parsed
        """
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                document = json.load(f)
        except OSError as e:
            raise DataFormatError(f"Failed to read {file_path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DataFormatError(f"Failed to parse {file_path}: {e}") from e

        bible = cls.parse_document(document)
        logger.info(
            f"Loaded {len(bible.verses)} verses from {file_path}"
            + (f" ({bible.name})" if bible.name else "")
        )
        return bible

    @staticmethod
    def group_books(verses: Iterable[VerseRecord]) -> List[Book]:
        """
        Group verses into books ordered by canonical book number.

        Verses keep their source order inside each book. Books are sorted by
        the book number of their first verse; sorted() is stable, so books
        with equal numbers stay in first-seen order.
        """
        books: Dict[str, Book] = {}
        for verse in verses:
            book = books.get(verse.book_name)
            if book is None:
                book = books[verse.book_name] = Book(name=verse.book_name)
            book.verses.append(verse)

        return sorted(books.values(), key=lambda book: book.number)
