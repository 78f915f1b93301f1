"""Shared test fixtures."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

import pytest

from idinfo.config.settings import Settings
from idinfo.decoders.decoder_registry import create_default_registry
from idinfo.detection.engine import DetectionEngine


@pytest.fixture
def settings():
    """Default settings, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def registry(settings):
    return create_default_registry(settings)


@pytest.fixture
def engine(registry):
    return DetectionEngine(registry)


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def second_ticks():
    """A clock returning float seconds that advances one second per call."""
    counter = itertools.count(1_700_000_000)
    return lambda: float(next(counter))


@pytest.fixture
def datetime_ticks():
    """A clock returning aware datetimes that advance one second per call."""
    counter = itertools.count()
    start = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    return lambda: start + timedelta(seconds=next(counter))


@pytest.fixture
def millisecond_ticks():
    """A clock returning int milliseconds that advances one millisecond per call."""
    counter = itertools.count(1_700_000_000_000)
    return lambda: next(counter)
