"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from odiphone.encode.encoder import ODIphone

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def config_path() -> Path:
    return FIXTURES_DIR / "config_test.yaml"


@pytest.fixture
def custom_tables_path() -> Path:
    return FIXTURES_DIR / "custom_tables.yaml"


@pytest.fixture
def words_path() -> Path:
    return FIXTURES_DIR / "words.txt"


@pytest.fixture(scope="session")
def encoder() -> ODIphone:
    return ODIphone()
