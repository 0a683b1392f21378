"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from etracker.core import config as config_module
from etracker.core.config import reload_config
from etracker.store import ExpenseStore
from tests.fixtures.synthetic_data import write_storage_file


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """Data directory used by the CLI during a test."""
    return tmp_path / "data"


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, data_dir):
    """Pin the test environment and point the data directory at a temp dir."""
    monkeypatch.setenv("ETRACKER_ENV", "test")
    monkeypatch.setenv("ETRACKER_DATA_DIR", str(data_dir))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("DEBUG", raising=False)
    reload_config()
    yield
    config_module._config = None


@pytest.fixture
def storage_file(data_dir) -> Path:
    """Path of the CSV backing store inside the test data directory."""
    return data_dir / "expenses.csv"


@pytest.fixture
def store(storage_file) -> ExpenseStore:
    """Empty store backed by a not-yet-existing CSV file."""
    return ExpenseStore.open(storage_file)


@pytest.fixture
def write_csv(storage_file):
    """Write raw data rows (header added) to the backing store."""

    def _write(*rows: str) -> Path:
        return write_storage_file(storage_file, list(rows))

    return _write


@pytest.fixture
def sample_rows() -> list[str]:
    """Three expenses over two months and two categories."""
    return [
        "1,Tea,20,Drinks,2024-01-05T10:00:00.000Z,2024-01-05T10:00:00.000Z",
        "2,Lunch,12.50,Food,2024-01-20T12:30:00.000Z,2024-01-21T08:00:00.000Z",
        "3,Coffee,4.25,Drinks,2024-07-02T09:15:00.000Z,2024-07-02T09:15:00.000Z",
    ]


@pytest.fixture
def runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "e2e: End-to-end tests running the CLI in a subprocess")
