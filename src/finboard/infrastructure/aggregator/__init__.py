"""Aggregation API adapters."""

from finboard.infrastructure.aggregator.plaid_client import PlaidAggregatorClient

__all__ = ["PlaidAggregatorClient"]
