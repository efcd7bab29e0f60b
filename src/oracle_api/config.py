"""Configuration system using pydantic-settings with environment variable loading."""

from dataclasses import dataclass

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONTRACT = "delphioracle"
DEFAULT_TABLE = "datapoints"


@dataclass(frozen=True)
class OracleConfig:
    """Static oracle configuration, resolved once at process start.

    Passed by value into every request's parameter resolution step.
    """

    contract: str = DEFAULT_CONTRACT
    table: str = DEFAULT_TABLE


class OracleSettings(BaseSettings):
    """Oracle contract/table selection. Unset fields fall back to the literal defaults."""

    model_config = SettingsConfigDict(env_prefix="ORACLE_")

    contract: str | None = None
    table: str | None = None

    def resolve(self) -> OracleConfig:
        """Freeze these settings into an OracleConfig, applying defaults for empty values."""
        return OracleConfig(
            contract=self.contract or DEFAULT_CONTRACT,
            table=self.table or DEFAULT_TABLE,
        )


class ChainSettings(BaseSettings):
    """Chain identity. The name prefixes every delta index pattern."""

    model_config = SettingsConfigDict(env_prefix="CHAIN_")

    name: str = "telos"


class StoreSettings(BaseSettings):
    """Document store (Elasticsearch-compatible) connection settings."""

    model_config = SettingsConfigDict(env_prefix="STORE_")

    url: str = "http://localhost:9200"
    username: str = ""
    password: SecretStr = SecretStr("")
    timeout_seconds: float = 30.0
    verify_tls: bool = True


class ApiSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "0.0.0.0"
    port: int = 7000


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    oracle: OracleSettings = OracleSettings()
    chain: ChainSettings = ChainSettings()
    store: StoreSettings = StoreSettings()
    api: ApiSettings = ApiSettings()
