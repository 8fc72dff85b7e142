"""Ports for banking domain."""

from finboard.domain.banking.ports.aggregator_port import AggregatorPort
from finboard.domain.banking.ports.transaction_provider import TransactionProvider

__all__ = ["AggregatorPort", "TransactionProvider"]
