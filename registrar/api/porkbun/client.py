"""
Porkbun API Client
Root client for one Porkbun account (API v3)
"""

from typing import Optional

import requests

from registrar.api.base_provider import BaseRegistrarClient
from registrar.api.credentials import PorkbunCredentials
from registrar.api.porkbun import builders
from registrar.api.porkbun.models import PingResponse, PricingResponse
from registrar.api.porkbun.scoped import PorkbunDns, PorkbunDomain, PorkbunDomains, PorkbunSsl
from registrar.api.transport import DEFAULT_TIMEOUT, Transport
from registrar.utils.config import PORKBUN_BASE_URL, Settings
from registrar.utils.logger import get_logger


logger = get_logger(__name__)


class PorkbunClient(BaseRegistrarClient):
    """
    Porkbun API client.
    The key pair is embedded in the JSON body of every authenticated call.

    Documentation: https://porkbun.com/api/json/v3/documentation
    """

    def __init__(
        self,
        api_key: str,
        secret_api_key: str,
        base_url: str = PORKBUN_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize Porkbun client.

        Args:
            api_key: Porkbun API key (pk1_...)
            secret_api_key: Porkbun secret API key (sk1_...)
            base_url: API base URL
            session: Optional requests.Session to share
            timeout: Per-request timeout in seconds
        """
        credential = PorkbunCredentials(api_key=api_key, secret_api_key=secret_api_key)
        transport = Transport(
            base_url,
            session=session,
            timeout=timeout,
            headers={"Content-Type": "application/json"}
        )
        super().__init__(credential, transport)

        logger.info(f"Porkbun client initialized - Base URL: {transport.base_url}")

    @classmethod
    def from_settings(cls, config: Settings, session: Optional[requests.Session] = None) -> "PorkbunClient":
        return cls(
            config.porkbun_api_key,
            config.porkbun_secret_api_key,
            base_url=config.porkbun_base_url,
            session=session,
            timeout=config.request_timeout
        )

    def ping(self) -> PingResponse:
        """
        Test the credentials.

        Returns:
            PingResponse with the caller's public IP
        """
        response = self._call(builders.ping(), PingResponse)
        logger.info(f"Porkbun ping OK - your IP: {response.your_ip}")
        return response

    def get_pricing(self) -> PricingResponse:
        """Registration, renewal and transfer prices for every TLD (no auth needed)"""
        return self._call(builders.get_pricing(), PricingResponse)

    # --- Scoped clients ---

    def domains(self) -> PorkbunDomains:
        return PorkbunDomains(self)

    def domain(self, domain: str) -> PorkbunDomain:
        return PorkbunDomain(self, domain)

    def dns(self, domain: str) -> PorkbunDns:
        return PorkbunDns(self, domain)

    def ssl(self, domain: str) -> PorkbunSsl:
        return PorkbunSsl(self, domain)
