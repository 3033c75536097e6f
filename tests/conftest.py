"""Shared fixtures for AddrLens tests."""

from typing import Optional

import pytest

from addrlens.models import NameServiceError
from addrlens.resolve.base import NameService


class FakeNameService(NameService):
    """In-memory name service driven by dictionaries."""

    name = "fake"

    def __init__(self, forward: Optional[dict] = None, reverse: Optional[dict] = None):
        self.forward = forward or {}
        self.reverse = reverse or {}
        self.forward_calls: list[str] = []
        self.reverse_calls: list[str] = []

    def resolve_name(self, name: str) -> list[str]:
        self.forward_calls.append(name)
        if name not in self.forward:
            raise NameServiceError(name, "Name or service not known")
        return list(self.forward[name])

    def reverse_lookup(self, address: str) -> list[str]:
        self.reverse_calls.append(address)
        if address not in self.reverse:
            raise NameServiceError(address, "Unknown host")
        return list(self.reverse[address])


@pytest.fixture
def fake_backend():
    """Name service that knows a few hosts and PTR records."""
    return FakeNameService(
        forward={
            "example.test": ["93.184.216.34", "2606:2800:220:1:248:1893:25c8:1946"],
            "dup.test": ["10.0.0.1", "10.0.0.1", "10.0.0.2"],
            "empty.test": [],
        },
        reverse={
            "8.8.8.8": ["dns.google"],
            "93.184.216.34": ["edge.example.test", "alias.example.test"],
            "127.0.0.1": ["localhost"],
        },
    )
