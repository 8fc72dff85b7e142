"""FastAPI dependency injection for the finboard API.

Provides dependencies for:
- Database sessions
- The aggregator adapter and transaction provider
- The current user, as forwarded by the upstream gateway
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finboard.application.ports.identity import CurrentUser
from finboard.application.queries import GetInstitutionQuery
from finboard.domain.banking.ports import AggregatorPort, TransactionProvider
from finboard.domain.shared.exceptions import MissingUserError
from finboard.infrastructure.aggregator import PlaidAggregatorClient
from finboard.infrastructure.banking import (
    EmptyTransactionProvider,
    StaticTransactionProvider,
)
from finboard.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from finboard_config.settings import get_settings

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    Returns
    -------
    AsyncEngine instance
    """
    return create_async_engine(
        get_settings().database_url,
        echo=False,
        pool_pre_ping=True,
    )


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]


# -----------------------------------------------------------------------------
# Aggregator & Transaction Source
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_aggregator() -> AggregatorPort:
    """Get the shared aggregator adapter (singleton, closed on shutdown)."""
    return PlaidAggregatorClient.from_settings(get_settings())


@lru_cache(maxsize=1)
def get_transaction_provider() -> TransactionProvider:
    if get_settings().mock_transactions_enabled:
        return StaticTransactionProvider()
    logger.info("Mock transactions disabled, serving stored transfers only")
    return EmptyTransactionProvider()


def get_institution_query(
    aggregator: Annotated[AggregatorPort, Depends(get_aggregator)],
) -> GetInstitutionQuery:
    return GetInstitutionQuery.from_settings(aggregator, get_settings())


Aggregator = Annotated[AggregatorPort, Depends(get_aggregator)]
Provider = Annotated[TransactionProvider, Depends(get_transaction_provider)]
InstitutionQuery = Annotated[GetInstitutionQuery, Depends(get_institution_query)]


# -----------------------------------------------------------------------------
# Current User
# -----------------------------------------------------------------------------


def get_current_user(
    x_user_id: Annotated[str | None, Header()] = None,
    x_user_email: Annotated[str | None, Header()] = None,
) -> CurrentUser:
    """
    Resolve the calling user from gateway headers.

    Raises
    ------
    MissingUserError
        If no user id header is present
    """
    if not x_user_id or not x_user_id.strip():
        raise MissingUserError
    return CurrentUser(user_id=x_user_id.strip(), email=x_user_email)


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
