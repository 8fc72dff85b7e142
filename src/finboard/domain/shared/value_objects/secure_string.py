"""Wrapper for aggregator access tokens and other secrets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

MASK = "*****"


@dataclass(frozen=True, repr=False)
class SecureString:
    """
    A non-empty secret that prints as ``*****``.

    Logging, ``repr()`` and pydantic dumps of a model holding one never show
    the value. Adapters call ``get_value()`` right before the outbound request.
    """

    _value: str

    def __post_init__(self):
        if not isinstance(self._value, str) or not self._value:
            msg = "SecureString needs a non-empty string"
            raise ValueError(msg)

    def get_value(self) -> str:
        return self._value

    def masked(self, visible: int = 4) -> str:
        """Log hint with the last ``visible`` characters, e.g. ``*****1234``."""
        if len(self._value) <= visible:
            return MASK
        return f"{MASK}{self._value[-visible:]}"

    def __str__(self) -> str:
        return MASK

    def __repr__(self) -> str:
        return f"SecureString({MASK})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        # Plain strings from the DB or a request body are wrapped; dumps are masked
        return core_schema.no_info_plain_validator_function(
            lambda value: value if isinstance(value, cls) else cls(value),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda _: MASK,
                return_schema=core_schema.str_schema(),
            ),
        )
