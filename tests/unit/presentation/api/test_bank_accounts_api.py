"""API tests for the bank accounts endpoints."""

from datetime import datetime, timezone

from finboard.domain.banking.exceptions import (
    AggregatorAuthenticationError,
    AggregatorUnavailableError,
)
from tests.shared.fixtures import (
    TEST_USER_ID,
    TEST_USER_ID_2,
    make_account,
    make_link,
    make_snapshot,
    make_transfer,
)


def _accounts_by_token(snapshots: dict):
    def _get_accounts(access_token):
        outcome = snapshots[access_token.get_value().removeprefix("access-sandbox-")]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return _get_accounts


class TestListBankAccounts:
    """Tests for GET /bank-accounts."""

    def test_returns_accounts_and_totals(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
        link_repository,
        aggregator,
    ):
        # Arrange
        link_repository.find_all_by_user.return_value = [
            make_link("b1"),
            make_link("b2"),
        ]
        aggregator.get_accounts.side_effect = _accounts_by_token(
            {
                "b1": make_snapshot(make_account("a1", current="100.0")),
                "b2": make_snapshot(make_account("a2", current="250.5")),
            },
        )

        # Act
        response = test_client.get(
            f"{api_v1_prefix}/bank-accounts",
            headers=user_headers,
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["total_banks"] == 2
        assert body["total_current_balance"] == "350.5"
        assert [a["link_id"] for a in body["data"]] == ["b1", "b2"]
        assert body["data"][0]["institution_name"] == "First Platypus Bank"
        assert body["errors"] == []
        link_repository.find_all_by_user.assert_awaited_once_with(TEST_USER_ID)

    def test_failing_link_is_reported(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
        link_repository,
        aggregator,
    ):
        link_repository.find_all_by_user.return_value = [
            make_link("b1"),
            make_link("b2"),
        ]
        aggregator.get_accounts.side_effect = _accounts_by_token(
            {
                "b1": make_snapshot(make_account("a1")),
                "b2": AggregatorAuthenticationError(),
            },
        )

        response = test_client.get(
            f"{api_v1_prefix}/bank-accounts",
            headers=user_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert len(body["data"]) == 1
        assert body["errors"] == [
            {
                "link_id": "b2",
                "kind": "unauthorized",
                "code": "AGGREGATOR_AUTHENTICATION_FAILED",
                "message": "Aggregator rejected the credentials",
            },
        ]

    def test_fail_fast_maps_upstream_failure_to_503(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
        link_repository,
        aggregator,
    ):
        link_repository.find_all_by_user.return_value = [make_link("b1")]
        aggregator.get_accounts.side_effect = AggregatorUnavailableError("down")

        response = test_client.get(
            f"{api_v1_prefix}/bank-accounts",
            params={"fail_fast": "true"},
            headers=user_headers,
        )

        assert response.status_code == 503
        assert response.json() == {"detail": "down", "code": "AGGREGATOR_UNAVAILABLE"}

    def test_missing_user_is_unauthorized(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/bank-accounts")

        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"


class TestGetBankAccount:
    """Tests for GET /bank-accounts/{link_id}."""

    def test_returns_account_with_merged_transactions(
        self,
        test_client,
        api_v1_prefix,
        link_repository,
        transfer_repository,
        aggregator,
    ):
        # Arrange
        link_repository.find_by_id.return_value = make_link("b1")
        aggregator.get_accounts.return_value = make_snapshot(make_account("a1"))
        transfer_repository.find_by_bank_id.return_value = [
            make_transfer(
                "t1",
                sender_bank_id="b1",
                created_at=datetime(2024, 12, 2, tzinfo=timezone.utc),
            ),
        ]

        # Act
        response = test_client.get(f"{api_v1_prefix}/bank-accounts/b1")

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["data"]["id"] == "a1"
        transactions = body["transactions"]
        assert len(transactions) == 11
        assert transactions[0]["id"] == "t1"
        assert transactions[0]["type"] == "debit"
        assert transactions[0]["origin"] == "transfer"
        assert {t["origin"] for t in transactions[1:]} == {"external"}

    def test_unknown_link_is_404(self, test_client, api_v1_prefix, link_repository):
        link_repository.find_by_id.return_value = None

        response = test_client.get(f"{api_v1_prefix}/bank-accounts/nope")

        assert response.status_code == 404
        assert response.json() == {
            "detail": "Bank link 'nope' not found",
            "code": "BANK_LINK_NOT_FOUND",
        }


class TestListLinkTransactions:
    """Tests for GET /bank-accounts/{link_id}/transactions."""

    def test_returns_feed_and_stored_transfers(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
        link_repository,
        transfer_repository,
    ):
        link_repository.find_by_id.return_value = make_link("b1")
        transfer_repository.find_by_account_id.return_value = [make_transfer("t1")]

        response = test_client.get(
            f"{api_v1_prefix}/bank-accounts/b1/transactions",
            headers=user_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 11
        assert body["transactions"][-1]["id"] == "t1"
        grocery = next(
            t for t in body["transactions"] if t["name"] == "Grocery Store"
        )
        assert grocery["category"] == "Shopping"
        transfer_repository.find_by_account_id.assert_awaited_once_with(TEST_USER_ID)

    def test_link_of_other_user_is_404(
        self,
        test_client,
        api_v1_prefix,
        user_headers,
        link_repository,
    ):
        link_repository.find_by_id.return_value = make_link(
            "b1",
            user_id=TEST_USER_ID_2,
        )

        response = test_client.get(
            f"{api_v1_prefix}/bank-accounts/b1/transactions",
            headers=user_headers,
        )

        assert response.status_code == 404
