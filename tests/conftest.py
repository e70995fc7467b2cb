"""Shared fixtures for Croupier tests."""

import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Make the package importable without an editable install
sys.path.insert(0, str(Path(__file__).parent.parent))

from croupier.config import Settings
from croupier.table import Player, PlayerRegistry


@pytest.fixture
def registry() -> PlayerRegistry:
    return PlayerRegistry(
        [
            Player(name="Alice"),
            Player(name="Bob"),
            Player(name="Carol", total_won=Decimal("5"), total_wagered=Decimal("7.5")),
        ]
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted at a temp data dir, ignoring any local .env."""
    return Settings(_env_file=None, data_dir=tmp_path)
