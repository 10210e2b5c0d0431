"""
Shared fixtures for the dashboard test suite.

- seeded_registry: registry holding the two example clients
- id_factory: deterministic ids ("id-1", "id-2", ...) so assertions can name new clients
- fake_notification: replaces plyer's backend and records every call
"""

import itertools

import pytest

from ddns_dashboard import notifier as notifier_module
from ddns_dashboard.notifier import Notifier
from ddns_dashboard.repository import ClientRegistry
from ddns_dashboard.session import DashboardSession


class FakeNotification:
    def __init__(self):
        self.calls = []
        self.error = None

    def notify(self, **kwargs):
        if self.error is not None:
            raise self.error
        self.calls.append(kwargs)


@pytest.fixture
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def registry(id_factory):
    return ClientRegistry(id_factory=id_factory)


@pytest.fixture
def seeded_registry(id_factory):
    return ClientRegistry.with_seed_clients(id_factory=id_factory)


@pytest.fixture
def fake_notification(monkeypatch):
    fake = FakeNotification()
    monkeypatch.setattr(notifier_module, "notification", fake)
    return fake


@pytest.fixture
def session(seeded_registry, fake_notification):
    return DashboardSession(seeded_registry, Notifier(enabled=True))
