"""
Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh in-memory SQLite database; see
tests/shared/fixtures/database.py.
"""

from tests.shared.fixtures.database import async_engine, async_session

__all__ = ["async_engine", "async_session"]
