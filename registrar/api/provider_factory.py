"""
Registrar Client Factory
Creates registrar clients based on configuration
"""

from typing import Optional

import requests

from registrar.api.base_provider import BaseRegistrarClient
from registrar.api.name_com import NameComClient
from registrar.api.porkbun import PorkbunClient
from registrar.utils.config import get_settings, Settings
from registrar.utils.logger import get_logger

logger = get_logger(__name__)

VALID_PROVIDERS = ("PORKBUN", "NAMECOM")


def get_registrar(
    provider_name: Optional[str] = None,
    config: Optional[Settings] = None,
    session: Optional[requests.Session] = None
) -> BaseRegistrarClient:
    """
    Factory function to create registrar client instances.

    Args:
        provider_name: Optional provider name ("PORKBUN" or "NAMECOM").
                      If None, reads from config.
        config: Optional Settings instance. Uses default if None.
        session: Optional requests.Session shared with the client

    Returns:
        Registrar client instance

    Raises:
        ValueError: If provider_name is invalid or its credentials are missing

    Example:
        # Use configured provider
        client = get_registrar()

        # Explicitly use Name.com
        client = get_registrar("NAMECOM")
    """
    if config is None:
        config = get_settings()

    if provider_name is None:
        provider_name = config.registrar_provider

    provider_name = provider_name.strip().upper().replace(".", "").replace("_", "")

    logger.info(f"Creating registrar client: {provider_name}")

    if provider_name == "PORKBUN":
        if not config.has_porkbun_credentials():
            raise ValueError(
                "Porkbun credentials missing: set PORKBUN_API_KEY and PORKBUN_SECRET_API_KEY"
            )
        return PorkbunClient.from_settings(config, session=session)

    elif provider_name == "NAMECOM":
        if not config.has_namecom_credentials():
            raise ValueError(
                "Name.com credentials missing: set NAMECOM_USERNAME and NAMECOM_TOKEN"
            )
        return NameComClient.from_settings(config, session=session)

    else:
        raise ValueError(
            f"Unknown registrar: {provider_name}. "
            f"Valid options are: {', '.join(VALID_PROVIDERS)}"
        )
