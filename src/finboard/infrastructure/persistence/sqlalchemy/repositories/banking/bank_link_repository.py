"""SQLAlchemy implementation of BankLinkRepository."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from finboard.domain.banking.repositories import BankLinkRepository
from finboard.domain.banking.value_objects import BankLink
from finboard.domain.shared.value_objects import SecureString
from finboard.infrastructure.persistence.sqlalchemy.models import BankLinkModel

logger = logging.getLogger(__name__)


class BankLinkRepositorySQLAlchemy(BankLinkRepository):
    """SQLAlchemy implementation of bank link repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all_by_user(self, user_id: str) -> list[BankLink]:
        stmt = (
            select(BankLinkModel)
            .where(BankLinkModel.user_id == user_id)
            .order_by(BankLinkModel.created_at, BankLinkModel.id)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._map_to_domain(model) for model in models]

    async def find_by_id(self, link_id: str) -> Optional[BankLink]:
        model = await self._session.get(BankLinkModel, link_id)
        if not model:
            return None
        return self._map_to_domain(model)

    async def save(self, link: BankLink) -> None:
        model = await self._session.get(BankLinkModel, link.id)

        if model:
            logger.debug("Updating existing bank link: %s", link.id)
            model.user_id = link.user_id
            model.access_token = link.access_token.get_value()
            model.shareable_id = link.shareable_id
            model.account_id = link.account_id
            model.institution_id = link.institution_id
        else:
            logger.debug("Creating new bank link: %s", link.id)
            self._session.add(
                BankLinkModel(
                    id=link.id,
                    user_id=link.user_id,
                    access_token=link.access_token.get_value(),
                    shareable_id=link.shareable_id,
                    account_id=link.account_id,
                    institution_id=link.institution_id,
                ),
            )

        await self._session.flush()

    @staticmethod
    def _map_to_domain(model: BankLinkModel) -> BankLink:
        return BankLink(
            id=model.id,
            user_id=model.user_id,
            access_token=SecureString(model.access_token),
            shareable_id=model.shareable_id,
            account_id=model.account_id,
            institution_id=model.institution_id,
        )
