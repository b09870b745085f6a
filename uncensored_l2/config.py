from pathlib import Path
from typing import Dict

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Logging level")

    # Chain reads
    request_timeout_seconds: int = Field(default=30, description="JSON-RPC request timeout")
    rpc_urls: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-chain RPC URL overrides keyed by chain name (JSON object)",
    )

    # Contract overrides (JSON objects keyed by chain name)
    router_addresses: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-chain router address overrides",
    )
    proxy_addresses: Dict[str, str] = Field(
        default_factory=dict,
        description="Per-chain L1 enforcement proxy (portal) address overrides",
    )
    fee_rates_per_mille: Dict[str, int] = Field(
        default_factory=dict,
        description="Per-chain fee surcharge overrides in parts per thousand",
        validation_alias=AliasChoices("fee_rates_per_mille", "fee_rates", "FEE_RATES"),
    )
    default_fee_rate_per_mille: int = Field(
        default=3,
        ge=0,
        description="Fee surcharge applied when a chain has no explicit rate",
    )

    # Enforcement transaction shape
    deadline_seconds: int = Field(default=2 * 24 * 60 * 60, ge=1, description="Swap deadline offset")
    enforcement_gas_limit: int = Field(default=500_000, ge=21_000, description="L2 gas limit for the deposit")

    @property
    def is_debug(self) -> bool:
        return self.log_level.upper() == "DEBUG"


# Global settings instance
settings = Settings()
