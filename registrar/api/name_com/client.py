"""
Name.com API Client
Root client for one Name.com account (Core API v1)
"""

from typing import Optional

import requests

from registrar.api.base_provider import BaseRegistrarClient
from registrar.api.credentials import NameComCredentials
from registrar.api.name_com import builders
from registrar.api.name_com.models import Hello
from registrar.api.name_com.scoped import (
    NameComDns,
    NameComDomain,
    NameComDomains,
    NameComUrlForwarding,
    NameComVanityNameservers,
)
from registrar.api.transport import DEFAULT_TIMEOUT, Transport
from registrar.utils.config import NAMECOM_DEVELOPMENT_URL, NAMECOM_PRODUCTION_URL, Settings
from registrar.utils.logger import get_logger


logger = get_logger(__name__)


class NameComClient(BaseRegistrarClient):
    """
    Name.com API client.
    Authenticates with HTTP basic auth (username + API token). Errors
    come back as non-2xx responses with a {"message", "details"} body.

    Documentation: https://docs.name.com/
    """

    PRODUCTION_HOST = NAMECOM_PRODUCTION_URL
    DEVELOPMENT_HOST = NAMECOM_DEVELOPMENT_URL

    def __init__(
        self,
        username: str,
        token: str,
        host: str = NAMECOM_PRODUCTION_URL,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        """
        Initialize Name.com client.

        Args:
            username: Name.com account username
            token: API token (production and development tokens differ)
            host: API host, see PRODUCTION_HOST / DEVELOPMENT_HOST
            session: Optional requests.Session to share
            timeout: Per-request timeout in seconds
        """
        credential = NameComCredentials(username=username, token=token)
        super().__init__(credential, Transport(host, session=session, timeout=timeout))

        logger.info(f"Name.com client initialized - Environment: {self.get_environment()}")

    @classmethod
    def development(cls, username: str, token: str, **kwargs) -> "NameComClient":
        """Client for the Name.com test environment"""
        return cls(username, token, host=cls.DEVELOPMENT_HOST, **kwargs)

    @classmethod
    def from_settings(cls, config: Settings, session: Optional[requests.Session] = None) -> "NameComClient":
        return cls(
            config.namecom_username,
            config.namecom_token,
            host=config.namecom_base_url,
            session=session,
            timeout=config.request_timeout
        )

    def get_environment(self) -> str:
        """Get current environment (DEVELOPMENT or PRODUCTION)"""
        if self.transport.base_url == self.DEVELOPMENT_HOST:
            return "DEVELOPMENT"
        return "PRODUCTION"

    def is_production(self) -> bool:
        return self.get_environment() == "PRODUCTION"

    def get_provider_name(self) -> str:
        return "Name.com"

    def hello(self) -> Hello:
        """Connectivity and credential check"""
        response = self._call(builders.hello(), Hello)
        logger.info(f"Name.com hello OK - server {response.server_name}, user {response.username}")
        return response

    def ping(self) -> Hello:
        return self.hello()

    # --- Scoped clients ---

    def domains(self) -> NameComDomains:
        return NameComDomains(self)

    def domain(self, domain_name: str) -> NameComDomain:
        return NameComDomain(self, domain_name)

    def dns(self, domain_name: str) -> NameComDns:
        return NameComDns(self, domain_name)

    def url_forwarding(self, domain_name: str) -> NameComUrlForwarding:
        return NameComUrlForwarding(self, domain_name)

    def vanity_ns(self, domain_name: str) -> NameComVanityNameservers:
        return NameComVanityNameservers(self, domain_name)
