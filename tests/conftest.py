"""Shared pytest fixtures for equity tests."""

from random import Random

import pytest

from config.settings import EquityConfig
from tests.helpers.card_utils import make_snapshot


@pytest.fixture
def rng():
    """Provide a reproducible random source."""
    return Random(42)


@pytest.fixture
def thread_config():
    """Small, threaded simulation settings for fast tests."""
    return EquityConfig(trials=400, workers=4, executor="thread")


@pytest.fixture
def aces_vs_kings_river():
    """AA vs KK on a complete, dry board."""
    return make_snapshot([["As", "Ad"], ["Ks", "Kd"]], ["2c", "7d", "9h", "Jc", "Qs"])


@pytest.fixture
def aces_vs_kings_flop():
    """AA vs KK on the flop."""
    return make_snapshot([["As", "Ad"], ["Ks", "Kd"]], ["2c", "7d", "9h"])
