"""Shared fixtures for TurnIt tests."""

import random
from datetime import datetime, timezone

import pytest

from turnit import create_app
from turnit.config import TestingConfig
from turnit.services.auth_service import get_auth_service
from turnit.services.dictionary import WordDictionary
from turnit.services.game_service import initialize_game_service
from turnit.services.ring_generator import RingGenerator


class FakeClock:
    """Settable clock for streak tests."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 3, 10, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def dictionary(rng):
    return WordDictionary(["cat", "lock", "crane", "slate", "apple", "eagle", "puzzle"], rng=rng)


@pytest.fixture
def game_service(dictionary, rng, clock):
    return initialize_game_service(
        dictionary=dictionary,
        ring_generator=RingGenerator(rng),
        clock=clock,
    )


@pytest.fixture
def app(game_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(app):
    """Build bearer headers for a user."""
    def _headers(user_id: str = "t2_alice", username: str = "alice"):
        token = get_auth_service().issue_token(user_id, username)
        return {"Authorization": f"Bearer {token}"}
    return _headers
