"""Shared pytest setup.

``tests/unit`` runs against mocks and in-memory SQLite. ``tests/integration``
talks to the live Plaid sandbox and is skipped unless ``--run-integration``,
``--run-all``, ``RUN_INTEGRATION=1`` or ``RUN_ALL_TESTS=1`` is given.
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from finboard_config import clear_settings_cache

CONFIG_DIR = Path(__file__).resolve().parents[1] / "config"
for _name in (".env.dev", ".env"):
    if (CONFIG_DIR / _name).exists():
        load_dotenv(CONFIG_DIR / _name)
        break


def _flag(name: str) -> bool:
    return os.environ.get(name, "").lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Include tests that call the Plaid sandbox",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Do not skip anything by marker",
    )


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: calls the live Plaid sandbox (skipped by default)",
    )


def pytest_collection_modifyitems(config, items):
    enabled = (
        config.getoption("--run-all")
        or config.getoption("--run-integration")
        or _flag("RUN_ALL_TESTS")
        or _flag("RUN_INTEGRATION")
    )
    if enabled:
        return

    skip = pytest.mark.skip(reason="needs --run-integration or RUN_INTEGRATION=1")
    for item in items:
        if item.get_closest_marker("integration"):
            item.add_marker(skip)


@pytest.fixture(scope="session", autouse=True)
def fresh_settings():
    """Start and end the session without cached Settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
