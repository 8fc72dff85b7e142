"""Shared pytest fixtures and builders."""

from tests.shared.fixtures.database import async_engine, async_session
from tests.shared.fixtures.factories import (
    TEST_INSTITUTION_ID,
    TEST_USER_ID,
    TEST_USER_ID_2,
    make_account,
    make_external,
    make_institution,
    make_link,
    make_snapshot,
    make_transfer,
)

__all__ = [
    "TEST_INSTITUTION_ID",
    "TEST_USER_ID",
    "TEST_USER_ID_2",
    "async_engine",
    "async_session",
    "make_account",
    "make_external",
    "make_institution",
    "make_link",
    "make_snapshot",
    "make_transfer",
]
