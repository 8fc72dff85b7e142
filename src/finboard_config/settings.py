"""finboard settings.

Precedence, highest first: process environment, the file named by
``FINBOARD_ENV_FILE``, ``config/.env.dev``, ``config/.env``, field defaults.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PLAID_BASE_URLS: dict[str, str] = {
    "sandbox": "https://sandbox.plaid.com",
    "development": "https://development.plaid.com",
    "production": "https://production.plaid.com",
}

ENV_FILE_VAR = "FINBOARD_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve()
    marker = next(
        (p for p in here.parents if (p / "config").is_dir() or (p / ".git").is_dir()),
        None,
    )
    # src/finboard_config/settings.py -> repository root
    return marker or here.parents[2]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in ENV_FILE_CANDIDATES:
        candidate = config_dir / name
        if candidate.exists():
            return candidate
    return None


class Settings(BaseSettings):
    """Runtime configuration for the API, the CLI and the Plaid adapter."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "finboard"
    debug: bool = False

    # Aggregator (PLAID_ prefix)
    plaid_client_id: str = ""
    plaid_secret: SecretStr = SecretStr("")
    plaid_env: Literal["sandbox", "development", "production"] = "sandbox"
    plaid_country_code: str = "US"
    aggregator_timeout: float = 10.0

    # Transaction source
    mock_transactions_enabled: bool = True

    # Store
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: SecretStr = SecretStr("")
    postgres_db: str = "finboard"
    database_url_override: str | None = None

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_cors_origins: str = ""  # Empty = no CORS allowed

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> str:
        """Accept a list or a comma-separated string."""
        if isinstance(v, list):
            return ",".join(v)
        return str(v) if v else ""

    @field_validator("plaid_country_code")
    @classmethod
    def _validate_country_code(cls, v: str) -> str:
        v = v.strip().upper()
        if len(v) != 2 or not v.isalpha():
            msg = "Country code must be a two-letter ISO code"
            raise ValueError(msg)
        return v

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL; ``database_url_override`` wins when set."""
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql+asyncpg://{self.postgres_user}:"
            f"{self.postgres_password.get_secret_value()}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]

    @property
    def plaid_base_url(self) -> str:
        return PLAID_BASE_URLS[self.plaid_env]


@lru_cache()
def get_settings() -> Settings:
    """Process-wide Settings instance."""
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached Settings so the next call rereads the environment."""
    get_settings.cache_clear()
