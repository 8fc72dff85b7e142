"""Banking domain package.

This package contains the domain model for reading linked bank accounts,
institutions and transactions from the aggregator and the local store.
"""
