"""Shared fixtures for the draft board test suite."""

import pytest

from src.ranking_engine.weights import WeightSettings
from src.roster.models import Player
from src.roster.roster_store import RosterStore


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

def make_player(name, position="WR", adp=50.0, **kwargs):
    return Player(name=name, position=position, adp=float(adp), **kwargs)


@pytest.fixture
def players():
    """Eight players across all four roles, deliberately not in ADP order."""
    return [
        make_player("Alpha QB", "QB", 30, injury_risk=0.10, upside=0.90, offense=1),
        make_player("Bravo RB", "RB", 2, injury_risk=0.20, upside=0.95, offense=2),
        make_player("Charlie WR", "WR", 5, injury_risk=0.10, upside=0.97, offense=1),
        make_player("Delta TE", "TE", 40, injury_risk=0.15, upside=0.80, offense=2),
        make_player("Echo RB", "RB", 60, rookie=True, injury_risk=0.22, upside=0.78, offense=3),
        make_player("Foxtrot WR", "WR", 12, injury_risk=0.12, upside=0.90, offense=2),
        make_player("Golf QB", "QB", 90, rookie=True),
        make_player("Hotel TE", "TE", 150, upside=0.60, offense=4),
    ]


@pytest.fixture
def roster(players):
    return RosterStore(players)


@pytest.fixture
def default_weights():
    return WeightSettings().to_weights()


@pytest.fixture
def kv_store():
    """An in-memory key-value store."""
    return {}
