"""
Base Registrar Client and capability interfaces
Abstract base classes shared by every registrar implementation
"""

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Type, TypeVar

from pydantic import BaseModel

from registrar.api.credentials import Credential
from registrar.api.normalizer import normalize
from registrar.api.transport import Transport, WireRequest
from registrar.utils.validators import validate_domain


M = TypeVar("M", bound=BaseModel)


class BaseRegistrarClient(ABC):
    """
    Root client for one registrar account.
    Owns the credential and a shared Transport; neither is mutated after
    construction, so any number of scoped clients can use them at once.
    """

    def __init__(self, credential: Credential, transport: Transport):
        self._credential = credential
        self._transport = transport

    @property
    def credential(self) -> Credential:
        return self._credential

    @property
    def transport(self) -> Transport:
        return self._transport

    def _call(self, request: WireRequest, model: Optional[Type[M]] = None) -> Optional[M]:
        """
        Send a built request and normalize the response.

        Args:
            request: Builder output
            model: Expected response model, None if no body is expected

        Returns:
            Parsed response model (or None)
        """
        raw = self._transport.send(request, self._credential)
        return normalize(raw, model)

    @abstractmethod
    def ping(self) -> Any:
        """
        Verify connectivity and credentials with a cheap authenticated call.
        """
        pass

    @abstractmethod
    def domains(self) -> "DomainLister":
        """
        Account-scoped handle for domain listing.
        """
        pass

    @abstractmethod
    def dns(self, domain: str) -> "RecordManager":
        """
        Domain-scoped handle for DNS record management.

        Args:
            domain: Domain whose records are managed
        """
        pass

    def get_provider_name(self) -> str:
        """
        Get provider name.
        Default implementation returns class name.

        Returns:
            Provider name string
        """
        return self.__class__.__name__.replace("Client", "")

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self._transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class ScopedClient:
    """
    Lightweight view over a root client, bound to scope parameters.
    Holds no state of its own besides the scope; creating one makes no
    network call.
    """

    def __init__(self, client: BaseRegistrarClient):
        self._client = client

    def _call(self, request: WireRequest, model: Optional[Type[M]] = None) -> Optional[M]:
        return self._client._call(request, model)


class DomainScopedClient(ScopedClient):
    """Scoped client bound to a single domain name"""

    def __init__(self, client: BaseRegistrarClient, domain: str):
        super().__init__(client)
        self._domain = validate_domain(domain)

    @property
    def domain(self) -> str:
        return self._domain

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(domain={self._domain!r})"


class DomainLister(ABC):
    """Capability: list every domain in the account"""

    @abstractmethod
    def list_domains(self) -> List[Any]:
        """
        Get every domain in the account, following all pages.

        Returns:
            List of provider domain models
        """
        pass


class RecordManager(ABC):
    """Capability: CRUD on the DNS records of one domain"""

    @abstractmethod
    def record_request(
        self,
        record_type: str,
        content: str,
        name: Optional[str] = None,
        ttl: Optional[int] = None,
        priority: Optional[int] = None
    ) -> Any:
        """
        Build this provider's create/update request from neutral fields.

        Args:
            record_type: Record type (A, AAAA, CNAME, MX, TXT, ...)
            content: Record value / answer
            name: Host label, None for the apex
            ttl: Time to live in seconds
            priority: Priority (MX/SRV)
        """
        pass

    @abstractmethod
    def list_records(self) -> List[Any]:
        """Get every DNS record of the domain"""
        pass

    @abstractmethod
    def get_record(self, record_id: int) -> Any:
        """Get a single DNS record by id"""
        pass

    @abstractmethod
    def create_record(self, request: Any) -> Any:
        """Create a DNS record"""
        pass

    @abstractmethod
    def update_record(self, record_id: int, request: Any) -> Any:
        """Replace a DNS record by id"""
        pass

    @abstractmethod
    def delete_record(self, record_id: int) -> None:
        """Delete a DNS record by id"""
        pass
