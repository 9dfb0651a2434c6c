"""Shared fixtures and Discord fakes for the test suite."""
import json
from types import SimpleNamespace

import discord
import pytest

from services.data_service import VerseRecord


def http_error(status=500, message="Internal Server Error"):
    return discord.HTTPException(SimpleNamespace(status=status, reason=message), message)


def forbidden():
    return discord.Forbidden(SimpleNamespace(status=403, reason="Forbidden"), "Missing Permissions")


class FakeRole:
    def __init__(self, name, default=False):
        self.name = name
        self.default = default

    def is_default(self):
        return self.default


class FakeChannel:
    def __init__(self, name, fail_on_send=()):
        self.name = name
        self.sent = []
        self.overwrites = []
        self.fail_on_send = set(fail_on_send)
        self.fail_permissions = False
        self._attempts = 0

    async def send(self, content):
        attempt = self._attempts
        self._attempts += 1
        if attempt in self.fail_on_send:
            raise http_error()
        self.sent.append(content)

    async def set_permissions(self, target, *, overwrite):
        if self.fail_permissions:
            raise forbidden()
        self.overwrites.append((target, overwrite))


class FakeGuild:
    def __init__(self, roles=None, fail_create=(), fail_permissions=(), fail_send=None, create_errors=None):
        self.id = 1234
        self.name = "Test Guild"
        self.roles = roles if roles is not None else [FakeRole("@everyone", default=True)]
        self.channels = []
        self.create_calls = []
        self.roles_error = None
        self.fail_create = set(fail_create)
        self.fail_permissions = set(fail_permissions)
        self.fail_send = fail_send or {}
        self.create_errors = create_errors or {}

    async def fetch_roles(self):
        if self.roles_error is not None:
            raise self.roles_error
        return self.roles

    async def create_text_channel(self, name):
        self.create_calls.append(name)
        if name in self.fail_create:
            raise forbidden()
        if name in self.create_errors:
            raise self.create_errors[name]
        channel = FakeChannel(name, self.fail_send.get(name, ()))
        channel.fail_permissions = name in self.fail_permissions
        self.channels.append(channel)
        return channel


def verse(book_name, book_number, chapter, verse_number, text):
    return VerseRecord(book_name, book_number, chapter, verse_number, text)


def verse_entry(book_name, book_number, chapter, verse_number, text):
    return {
        "book_name": book_name,
        "book": book_number,
        "chapter": chapter,
        "verse": verse_number,
        "text": text,
    }


@pytest.fixture
def guild():
    return FakeGuild()


@pytest.fixture
def sample_document():
    return {
        "metadata": {"name": "New English Translation"},
        "verses": [
            verse_entry("Genesis", 1, 1, 1, "In the beginning God created the heavens and the earth."),
            verse_entry("Genesis", 1, 1, 2, "Now the earth was without shape and empty."),
            verse_entry("Exodus", 2, 1, 1, "These are the names of the sons of Israel."),
        ],
    }


@pytest.fixture
def data_file(tmp_path, sample_document):
    path = tmp_path / "net.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return str(path)
