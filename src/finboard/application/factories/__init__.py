"""Factories for the application layer."""

from finboard.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
