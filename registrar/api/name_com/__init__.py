"""
Name.com Core API v1 client

    client = NameComClient.development(username, token)
    client.hello()
    records = client.dns("example.org").list_records()
"""

from registrar.api.name_com.client import NameComClient
from registrar.api.name_com.scoped import (
    NameComDns,
    NameComDomain,
    NameComDomains,
    NameComUrlForwarding,
    NameComVanityNameservers,
)

__all__ = [
    "NameComClient",
    "NameComDns",
    "NameComDomain",
    "NameComDomains",
    "NameComUrlForwarding",
    "NameComVanityNameservers",
]
