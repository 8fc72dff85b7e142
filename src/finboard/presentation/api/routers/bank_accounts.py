"""Bank accounts router for linked account endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Query

from finboard.application.queries import (
    GetBankAccountQuery,
    GetTransactionsQuery,
    ListBankAccountsQuery,
)
from finboard.domain.banking.exceptions import BankLinkNotFoundError
from finboard.presentation.api.dependencies import (
    Aggregator,
    CurrentUserDep,
    InstitutionQuery,
    Provider,
    RepoFactory,
)
from finboard.presentation.api.schemas import (
    BankAccountDetailResponse,
    BankAccountListResponse,
    ExternalTransactionResponse,
    TransactionListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

FailFast = Annotated[
    bool,
    Query(description="Fail the whole request if any bank link fails"),
]


@router.get(
    "",
    summary="List bank accounts",
    responses={
        200: {"description": "Accounts of all bank links, with totals"},
        401: {"description": "Missing user or rejected aggregator credentials"},
        503: {"description": "Aggregator unavailable (fail_fast only)"},
    },
)
async def list_bank_accounts(
    factory: RepoFactory,
    aggregator: Aggregator,
    institution_query: InstitutionQuery,
    current_user: CurrentUserDep,
    fail_fast: FailFast = False,
) -> BankAccountListResponse:
    """
    List the live account of every bank link of the current user.

    Links that fail are reported under `errors` unless `fail_fast` is set.
    """
    query = ListBankAccountsQuery.from_factory(
        factory,
        aggregator,
        institution_query=institution_query,
    )
    result = await query.execute(current_user.user_id, fail_fast=fail_fast)
    return BankAccountListResponse.from_dto(result.unwrap())


@router.get(
    "/{link_id}",
    summary="Get bank account",
    responses={
        200: {"description": "Account with merged transactions"},
        404: {"description": "Bank link not found"},
        503: {"description": "Aggregator unavailable"},
    },
)
async def get_bank_account(
    link_id: str,
    factory: RepoFactory,
    aggregator: Aggregator,
    provider: Provider,
    institution_query: InstitutionQuery,
) -> BankAccountDetailResponse:
    """
    Get one bank account with its transactions, most recent first.

    Transfers stored for this link are merged with the transaction feed.
    """
    query = GetBankAccountQuery.from_factory(
        factory,
        aggregator,
        provider,
        institution_query=institution_query,
    )
    result = await query.execute(link_id)
    return BankAccountDetailResponse.from_dto(result.unwrap())


@router.get(
    "/{link_id}/transactions",
    summary="List transactions of a bank link",
    responses={
        200: {"description": "Transaction feed plus stored transfers, unsorted"},
        401: {"description": "Missing user"},
        404: {"description": "Bank link not found"},
    },
)
async def list_link_transactions(
    link_id: str,
    factory: RepoFactory,
    provider: Provider,
    current_user: CurrentUserDep,
) -> TransactionListResponse:
    """List the transaction feed of a bank link for the current user."""
    link = await factory.bank_link_repository().find_by_id(link_id)
    if link is None or link.user_id != current_user.user_id:
        raise BankLinkNotFoundError(link_id)

    query = GetTransactionsQuery.from_factory(factory, provider)
    result = await query.execute(link.access_token, current_user.user_id)
    transactions = result.unwrap()

    return TransactionListResponse(
        transactions=[ExternalTransactionResponse.from_domain(t) for t in transactions],
        total=len(transactions),
    )
