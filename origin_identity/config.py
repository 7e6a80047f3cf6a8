from __future__ import annotations

import os
from typing import Any, Dict

from dotenv import load_dotenv
from eth_utils import to_checksum_address
from pydantic import BaseModel, Field, ValidationError, field_validator

from .contracts import BASE_RPC, CONTRACTS
from .exceptions import OriginConfigurationError

SUPPORTED_SCHEMAS = ("v1", "v2")

_ENV_VARS = {
    "rpc_url": "ORIGIN_RPC_URL",
    "cache_ttl_ms": "ORIGIN_CACHE_TTL_MS",
    "call_timeout": "ORIGIN_CALL_TIMEOUT",
    "registry_schema": "ORIGIN_REGISTRY_SCHEMA",
    "registry_address": "ORIGIN_REGISTRY_ADDRESS",
    "token_address": "ORIGIN_TOKEN_ADDRESS",
    "faucet_address": "ORIGIN_FAUCET_ADDRESS",
}


class OriginSettings(BaseModel):
    """Resolved configuration for an ORIGIN client."""

    rpc_url: str = Field(default=BASE_RPC)
    cache_ttl_ms: int = Field(default=30_000, description="Cache entry lifetime in milliseconds")
    call_timeout: float = Field(default=10.0, description="Per remote read timeout in seconds")
    registry_schema: str = Field(default="v1")

    registry_address: str = Field(default=CONTRACTS["registry"])
    token_address: str = Field(default=CONTRACTS["clamsToken"])
    faucet_address: str = Field(default=CONTRACTS["faucet"])
    token_decimals: int = Field(default=18, description="Used when decimals() cannot be read")

    @field_validator("rpc_url")
    @classmethod
    def _ensure_http_scheme(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise OriginConfigurationError("ORIGIN RPC URL must start with http:// or https://")
        return value

    @field_validator("cache_ttl_ms")
    @classmethod
    def _ensure_non_negative_ttl(cls, value: int) -> int:
        if value < 0:
            raise OriginConfigurationError("Cache TTL must be >= 0 milliseconds")
        return value

    @field_validator("call_timeout")
    @classmethod
    def _ensure_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise OriginConfigurationError("Call timeout must be positive")
        return value

    @field_validator("registry_schema")
    @classmethod
    def _ensure_known_schema(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_SCHEMAS:
            raise OriginConfigurationError(
                f"Unknown registry schema '{value}', expected one of {', '.join(SUPPORTED_SCHEMAS)}"
            )
        return value

    @field_validator("registry_address", "token_address", "faucet_address")
    @classmethod
    def _ensure_checksum(cls, value: str) -> str:
        try:
            return to_checksum_address(value)
        except ValueError as exc:
            raise OriginConfigurationError(f"Invalid contract address: {value}") from exc

    @property
    def cache_ttl_seconds(self) -> float:
        return self.cache_ttl_ms / 1000.0

    @classmethod
    def load(cls, **overrides: Any) -> "OriginSettings":
        """Load settings from the environment (.env supported); explicit overrides win."""
        load_dotenv()

        raw: Dict[str, Any] = {}
        for field_name, env_name in _ENV_VARS.items():
            value = os.getenv(env_name)
            if value:
                raw[field_name] = value
        raw.update({k: v for k, v in overrides.items() if v is not None})

        try:
            return cls(**raw)
        except ValidationError as exc:
            raise OriginConfigurationError(str(exc)) from exc
