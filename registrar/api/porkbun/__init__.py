"""
Porkbun API v3 client

    client = PorkbunClient(api_key, secret_api_key)
    client.ping()
    records = client.dns("example.com").list_records()
"""

from registrar.api.porkbun.client import PorkbunClient
from registrar.api.porkbun.scoped import PorkbunDns, PorkbunDomain, PorkbunDomains, PorkbunSsl

__all__ = [
    "PorkbunClient",
    "PorkbunDns",
    "PorkbunDomain",
    "PorkbunDomains",
    "PorkbunSsl",
]
