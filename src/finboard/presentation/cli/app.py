"""finboard CLI application using Typer.

Read-only views of linked bank accounts for operators, plus a command to
run the API server.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from finboard.application.dtos import QueryResult
from finboard.application.dtos.banking import AccountDetailDTO, AccountsOverviewDTO
from finboard.application.queries import (
    GetBankAccountQuery,
    GetInstitutionQuery,
    ListBankAccountsQuery,
)
from finboard.domain.banking.value_objects import Institution
from finboard.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from finboard.presentation.api.dependencies import (
    get_aggregator,
    get_session_maker,
    get_transaction_provider,
)
from finboard_config.settings import get_settings

app = typer.Typer(
    name="finboard",
    help="finboard - linked bank accounts and transactions",
    no_args_is_help=True,
)
console = Console()


@asynccontextmanager
async def _repository_factory() -> AsyncIterator[SQLAlchemyRepositoryFactory]:
    async with get_session_maker()() as session:
        try:
            yield SQLAlchemyRepositoryFactory(session)
        finally:
            await get_aggregator().close()


def _institution_query() -> GetInstitutionQuery:
    return GetInstitutionQuery.from_settings(get_aggregator(), get_settings())


def _exit_on_failure(result: QueryResult) -> None:
    if result.failure is not None:
        console.print(
            f"[red]Error ({result.failure.code.value}):[/red] "
            f"{result.failure.message}",
        )
        raise typer.Exit(1)


async def _list_accounts(
    user_id: str,
    fail_fast: bool,
) -> QueryResult[AccountsOverviewDTO]:
    async with _repository_factory() as factory:
        query = ListBankAccountsQuery.from_factory(
            factory,
            get_aggregator(),
            institution_query=_institution_query(),
        )
        return await query.execute(user_id, fail_fast=fail_fast)


async def _get_account(link_id: str) -> QueryResult[AccountDetailDTO]:
    async with _repository_factory() as factory:
        query = GetBankAccountQuery.from_factory(
            factory,
            get_aggregator(),
            get_transaction_provider(),
            institution_query=_institution_query(),
        )
        return await query.execute(link_id)


async def _get_institution(institution_id: str) -> QueryResult[Institution]:
    try:
        return await _institution_query().execute(institution_id)
    finally:
        await get_aggregator().close()


@app.command("accounts")
def list_accounts(
    user_id: str = typer.Argument(..., help="User whose bank links to load"),
    fail_fast: bool = typer.Option(
        False,
        "--fail-fast",
        help="Fail if any bank link cannot be loaded",
    ),
) -> None:
    """List the live account of every bank link of a user."""
    result = asyncio.run(_list_accounts(user_id, fail_fast))
    _exit_on_failure(result)
    overview = result.unwrap()

    table = Table(title=f"Bank accounts of {user_id}")
    table.add_column("Link", style="cyan")
    table.add_column("Institution")
    table.add_column("Account")
    table.add_column("Mask", style="dim")
    table.add_column("Current", justify="right")
    table.add_column("Available", justify="right")

    for account in overview.accounts:
        table.add_row(
            account.link_id,
            account.institution_name,
            account.name,
            account.mask or "",
            f"{account.current_balance:.2f}",
            (
                f"{account.available_balance:.2f}"
                if account.available_balance is not None
                else "-"
            ),
        )

    console.print(table)
    console.print(
        f"[bold]{overview.total_banks} bank(s), "
        f"total current balance {overview.total_current_balance:.2f}[/bold]",
    )

    for failure in overview.errors:
        console.print(
            f"[yellow]Skipped {failure.link_id} ({failure.code.value}):[/yellow] "
            f"{failure.message}",
        )


@app.command("account")
def show_account(
    link_id: str = typer.Argument(..., help="Bank link id"),
    limit: int = typer.Option(
        20,
        "--limit",
        "-n",
        help="Number of transactions to show",
        min=1,
    ),
) -> None:
    """Show one bank account with its most recent transactions."""
    result = asyncio.run(_get_account(link_id))
    _exit_on_failure(result)
    detail = result.unwrap()
    account = detail.account

    console.print(
        f"\n[bold]{account.name}[/bold] ({account.institution_name}) "
        f"current balance [green]{account.current_balance:.2f}[/green]\n",
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Date", style="dim")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Type")
    table.add_column("Amount", justify="right")

    for tx in detail.transactions[:limit]:
        table.add_row(
            tx.date,
            tx.name,
            tx.category or "",
            tx.type or "",
            f"{tx.amount:.2f}",
        )

    console.print(table)
    console.print(
        f"[dim]{min(limit, len(detail.transactions))} of "
        f"{len(detail.transactions)} transactions[/dim]",
    )


@app.command("institution")
def show_institution(
    institution_id: str = typer.Argument(..., help="Aggregator institution id"),
) -> None:
    """Show display metadata of an institution."""
    result = asyncio.run(_get_institution(institution_id))
    _exit_on_failure(result)
    institution = result.unwrap()

    console.print(f"[bold]{institution.name}[/bold] ({institution.institution_id})")
    if institution.url:
        console.print(f"URL: {institution.url}")
    if institution.primary_color:
        console.print(f"Color: {institution.primary_color}")
    if institution.country_codes:
        console.print(f"Countries: {', '.join(institution.country_codes)}")
    if institution.products:
        console.print(f"Products: {', '.join(institution.products)}")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API server."""
    settings = get_settings()
    uvicorn.run(
        "finboard.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
