"""SQLAlchemy implementation of the repository factory."""

from sqlalchemy.ext.asyncio import AsyncSession

from finboard.infrastructure.persistence.sqlalchemy.repositories.banking import (
    BankLinkRepositorySQLAlchemy,
    TransferTransactionRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """Creates repositories sharing one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    def bank_link_repository(self) -> BankLinkRepositorySQLAlchemy:
        return BankLinkRepositorySQLAlchemy(self._session)

    def transfer_transaction_repository(
        self,
    ) -> TransferTransactionRepositorySQLAlchemy:
        return TransferTransactionRepositorySQLAlchemy(self._session)
