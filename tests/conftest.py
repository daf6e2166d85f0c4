"""Pytest configuration and fixtures."""

import json
from pathlib import Path
from typing import Any

import pytest

from quoter.engine import QuoteEngine
from quoter.models.pool import PoolSnapshot
from quoter.models.snapshot import load_snapshot
from tests.helpers import make_snapshot

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SNAPSHOTS_DIR = FIXTURES_DIR / "snapshots"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the fixtures directory path."""
    return FIXTURES_DIR


@pytest.fixture
def snapshots_dir() -> Path:
    """Return the snapshot fixtures directory path."""
    return SNAPSHOTS_DIR


def load_snapshot_json(name: str) -> dict[str, Any]:
    """Load raw snapshot JSON by fixture name (e.g. "sol_usdc_balanced")."""
    with open(SNAPSHOTS_DIR / f"{name}.json") as f:
        return json.load(f)


def load_snapshot_fixture(name: str) -> PoolSnapshot:
    """Load and validate a snapshot fixture by name."""
    return load_snapshot(load_snapshot_json(name))


@pytest.fixture
def engine() -> QuoteEngine:
    """A quote engine with the default configuration."""
    return QuoteEngine()


@pytest.fixture
def balanced_snapshot() -> PoolSnapshot:
    """$200k USDC and $200k SOL, both at a 50% target."""
    return make_snapshot()


@pytest.fixture
def balanced_snapshot_json() -> dict[str, Any]:
    """Raw JSON of the balanced SOL/USDC pool (same state as balanced_snapshot)."""
    return load_snapshot_json("sol_usdc_balanced")


@pytest.fixture
def curved_snapshot_json() -> dict[str, Any]:
    """Raw JSON of a SOL/USDC pool with bid/ask spreads and price curves."""
    return load_snapshot_json("sol_usdc_curved")
