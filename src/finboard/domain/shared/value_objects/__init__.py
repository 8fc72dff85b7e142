"""Shared value objects."""

from finboard.domain.shared.value_objects.secure_string import SecureString

__all__ = ["SecureString"]
