"""Shared fixtures for fieldrules tests."""

import pytest

from fieldrules.messages import MessageCatalog, use_messages


@pytest.fixture
def en():
    """Bundled English catalog."""
    return MessageCatalog.load("en")


@pytest.fixture(autouse=True)
def active_catalog(en):
    """Bind the English catalog for every test."""
    with use_messages(en):
        yield en


class FakeUpload:
    """Upload wrapper exposing only a size attribute."""

    def __init__(self, size):
        self.size = size


@pytest.fixture
def upload():
    return FakeUpload
