"""Shared test fixtures."""

import random

import pytest

from demo_server.config import Settings
from demo_server.notes import NoteStore
from demo_server.server import create_server
from demo_server.weather import SimulatedWeather


@pytest.fixture
def store() -> NoteStore:
    return NoteStore(clock=lambda: "2025-01-01T00:00:00+00:00")


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING")


@pytest.fixture
def server(settings, store):
    """Server with a seeded weather source and a fixed clock."""
    return create_server(settings, store=store, weather=SimulatedWeather(random.Random(42)))
