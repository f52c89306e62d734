"""Pytest configuration and fixtures."""

import pytest


class IdentityHash:
    """Hashes integer keys to themselves; collision-free for distinct keys."""

    def compute(self, key):
        return key

    def describe(self):
        return "IdentityHash"


class ConstantHash:
    """Sends every key to the same hash value."""

    def __init__(self, value=0):
        self.value = value

    def compute(self, key):
        return self.value

    def describe(self):
        return f"ConstantHash({self.value})"


class TableHash:
    """Looks the hash up in a fixed dict."""

    def __init__(self, mapping):
        self.mapping = dict(mapping)

    def compute(self, key):
        return self.mapping[key]

    def describe(self):
        return "TableHash"


@pytest.fixture
def identity_hash():
    return IdentityHash()


@pytest.fixture
def constant_hash():
    """Every key lands on ideal slot 0 for any capacity up to 1024."""
    return ConstantHash(1024)


@pytest.fixture
def seed():
    """Fixed seed for tests."""
    return 42


@pytest.fixture
def make_constant_hash():
    """Factory for hashers that send every key to one value."""
    return ConstantHash


@pytest.fixture
def make_table_hash():
    """Factory for hashers backed by a fixed key -> hash dict."""
    return TableHash
