"""
API Layer - Registrar Client Implementations
Supports multiple registrars behind shared capability interfaces
"""

# Base Client and Capabilities
from registrar.api.base_provider import (
    BaseRegistrarClient,
    DomainLister,
    DomainScopedClient,
    RecordManager,
    ScopedClient,
)

# Plumbing
from registrar.api.credentials import Credential, NameComCredentials, PorkbunCredentials
from registrar.api.normalizer import normalize
from registrar.api.pagination import Page, collect_all
from registrar.api.transport import RawResponse, Transport, WireRequest

# Registrar Implementations
from registrar.api.porkbun import PorkbunClient
from registrar.api.name_com import NameComClient

# Client Factory
from registrar.api.provider_factory import get_registrar

# Exceptions (shared across registrars)
from registrar.api.exceptions import (
    RegistrarError,
    NetworkError,
    SerializationError,
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError
)

__all__ = [
    # Base
    "BaseRegistrarClient",
    "DomainLister",
    "DomainScopedClient",
    "RecordManager",
    "ScopedClient",

    # Plumbing
    "Credential",
    "NameComCredentials",
    "PorkbunCredentials",
    "normalize",
    "Page",
    "collect_all",
    "RawResponse",
    "Transport",
    "WireRequest",

    # Registrars
    "PorkbunClient",
    "NameComClient",

    # Factory
    "get_registrar",

    # Exceptions
    "RegistrarError",
    "NetworkError",
    "SerializationError",
    "APIError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError"
]
