"""Store settings read from the environment (or a ``.env`` file).

The store password is never given a default: a process without
``STOCKWISE_DB_PASSWORD`` cannot open any repository.
"""

from __future__ import annotations

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """The environment does not describe a usable store."""


class StoreSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STOCKWISE_", env_file=".env", extra="ignore"
    )

    db_url: str = "sqlite:///data/stockwise.db"
    db_user: str = "stockwise"
    db_password: SecretStr | None = None
    db_echo: bool = False

    def require_password(self) -> str:
        if self.db_password is None or not self.db_password.get_secret_value():
            raise ConfigurationError(
                "Store credential missing: set STOCKWISE_DB_PASSWORD"
            )
        return self.db_password.get_secret_value()
