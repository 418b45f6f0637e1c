"""
Configuration management using Pydantic Settings
Loads and validates environment variables from .env file
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PORKBUN_BASE_URL = "https://api.porkbun.com/api/json/v3"
NAMECOM_PRODUCTION_URL = "https://api.name.com"
NAMECOM_DEVELOPMENT_URL = "https://api.dev.name.com"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Credentials for both registrars are optional here; the provider
    factory checks the ones it actually needs.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Registrar Selection
    registrar_provider: Literal["PORKBUN", "NAMECOM"] = Field(
        default="PORKBUN",
        description="Registrar to use: PORKBUN or NAMECOM"
    )

    # Porkbun API Configuration
    porkbun_api_key: str = Field(
        default="",
        description="Porkbun API key (pk1_...)"
    )
    porkbun_secret_api_key: str = Field(
        default="",
        description="Porkbun secret API key (sk1_...)"
    )
    porkbun_base_url: str = Field(
        default=PORKBUN_BASE_URL,
        description="Porkbun API v3 base URL"
    )

    # Name.com API Configuration
    namecom_username: str = Field(
        default="",
        description="Name.com account username"
    )
    namecom_token: str = Field(
        default="",
        description="Name.com API token"
    )
    namecom_env: Literal["PRODUCTION", "DEVELOPMENT"] = Field(
        default="PRODUCTION",
        description="Name.com environment: PRODUCTION or DEVELOPMENT"
    )

    # HTTP Configuration
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Per-request timeout in seconds"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    @property
    def namecom_base_url(self) -> str:
        """
        Returns the Name.com API host for the configured environment
        """
        if self.namecom_env == "DEVELOPMENT":
            return NAMECOM_DEVELOPMENT_URL
        return NAMECOM_PRODUCTION_URL

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("registrar_provider", mode="before")
    @classmethod
    def normalize_provider(cls, v):
        """Accept provider names in any case"""
        if isinstance(v, str):
            return v.strip().upper().replace(".", "").replace("_", "")
        return v

    def has_porkbun_credentials(self) -> bool:
        """Check if both Porkbun keys are set"""
        return bool(self.porkbun_api_key and self.porkbun_secret_api_key)

    def has_namecom_credentials(self) -> bool:
        """Check if Name.com username and token are set"""
        return bool(self.namecom_username and self.namecom_token)


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment (and .env, if present) on first call.

    Returns:
        Settings instance

    Raises:
        ValidationError: If environment variables are present but invalid
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None
