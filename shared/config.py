"""
Shared configuration management for the loyalty wallet services.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="WALLET_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int
    host: str = "0.0.0.0"


class WalletConfig(ServiceConfig):
    """Configuration for the wallet service."""

    service_name: str = "wallet"
    port: int = 3000

    # Issuer credentials
    service_account_file: str = Field(default="service-account.json")

    # Issuer account
    issuer_id: str = Field(default="3388000000022859545")
    class_suffix: str = Field(default="weberia_bonus_loyalty")

    # External endpoints
    wallet_api_url: str = Field(default="https://walletobjects.googleapis.com/walletobjects/v1")
    save_url_prefix: str = Field(default="https://pay.google.com/gp/v/save/")
    http_timeout: float = Field(default=10.0)

    # Card styling
    background_color: str = Field(default="#0000FF")
    logo_uri: str = Field(default="https://i.ibb.co/QjhJ1hBz/larins-logo-removebg-preview-2-1.png")
    background_image_uri: str = Field(default="https://i.ibb.co/vxty4cVb/loyality-card-clean-1.png")

    # HTTP contract
    strict_status_codes: bool = Field(default=False)

    # Security
    api_key: Optional[str] = Field(default=None)

    @property
    def class_id(self) -> str:
        """Fully qualified loyalty class identifier."""
        return f"{self.issuer_id}.{self.class_suffix}"


def get_config(service_name: str, port: int) -> ServiceConfig:
    """Get configuration for a specific service."""
    return ServiceConfig(service_name=service_name, port=port)


def get_wallet_config(**overrides) -> WalletConfig:
    """Get configuration for the wallet service."""
    return WalletConfig(**overrides)
