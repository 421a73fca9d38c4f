"""Pytest configuration and fixtures for DentSim seed data tests."""
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "seed"


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / f"{name}.json") as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to seed fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def items() -> list[dict]:
    return _load("items")


@pytest.fixture
def achievements() -> list[dict]:
    return _load("achievements")


@pytest.fixture
def npc_presets() -> list[dict]:
    return _load("npc_presets")


@pytest.fixture
def medical_cases() -> list[dict]:
    return _load("medical_cases")
