"""
Porkbun scoped clients
Created through PorkbunClient.domains(), .domain(), .dns() and .ssl()
"""

from typing import Dict, Iterable, List, Optional, Tuple

from registrar.api.base_provider import (
    DomainLister,
    DomainScopedClient,
    RecordManager,
    ScopedClient,
)
from registrar.api.pagination import Page, collect_all
from registrar.api.porkbun import builders
from registrar.api.porkbun.models import (
    AddUrlForward,
    CreateDnssecRecord,
    DnsRecord,
    DnsRecordCreateResponse,
    DnsRecordListResponse,
    DnsRecordRequest,
    DnssecRecord,
    DnssecRecordListResponse,
    DomainCheckResponse,
    DomainInfo,
    DomainListResponse,
    EditDnsRecordsByNameType,
    GlueRecord,
    GlueRecordIps,
    GlueRecordListResponse,
    NameserverListResponse,
    SslBundleResponse,
    StatusResponse,
    UrlForwardListResponse,
    UrlForwardRecord,
)
from registrar.utils.logger import get_logger


logger = get_logger(__name__)


class PorkbunDomains(ScopedClient, DomainLister):
    """Account-scoped operations"""

    def list_domains(self, include_labels: bool = False) -> List[DomainInfo]:
        """
        Get every domain in the account.
        /domain/listAll pages by a `start` offset; the offset advances by
        the number of domains received until Porkbun returns an empty page.

        Args:
            include_labels: Also return the labels assigned to each domain

        Returns:
            List of DomainInfo, in the order Porkbun returns them
        """
        logger.info("Fetching owned domains from Porkbun")

        def fetch(start: int) -> Page[DomainInfo]:
            response = self._call(builders.list_domains(start, include_labels), DomainListResponse)
            return Page(
                items=response.domains,
                next_cursor=start + len(response.domains)
            )

        domains = collect_all(fetch, start=0)
        logger.info(f"Found {len(domains)} domains in Porkbun account")
        return domains


class PorkbunDomain(DomainScopedClient):
    """Operations on one domain: nameservers, URL forwarding, availability and glue records"""

    def get_nameservers(self) -> List[str]:
        """Authoritative nameservers at the registry"""
        response = self._call(builders.get_nameservers(self.domain), NameserverListResponse)
        return response.ns

    def update_nameservers(self, nameservers: Iterable[str]) -> StatusResponse:
        """
        Replace the domain's nameservers.

        Args:
            nameservers: Hostnames such as "ns1.example.net"
        """
        logger.info(f"Updating nameservers for {self.domain}")
        return self._call(builders.update_nameservers(self.domain, nameservers), StatusResponse)

    def add_url_forward(self, request: AddUrlForward) -> StatusResponse:
        logger.info(f"Adding URL forward on {self.domain} -> {request.location}")
        return self._call(builders.add_url_forward(self.domain, request), StatusResponse)

    def get_url_forwarding(self) -> List[UrlForwardRecord]:
        response = self._call(builders.get_url_forwarding(self.domain), UrlForwardListResponse)
        return response.forwards

    def delete_url_forward(self, record_id: int) -> StatusResponse:
        return self._call(builders.delete_url_forward(self.domain, record_id), StatusResponse)

    def check(self) -> DomainCheckResponse:
        """
        Check whether the domain can be registered, with pricing.
        Porkbun rate-limits this endpoint; the limits come back in the response.
        """
        logger.info(f"Checking availability for: {self.domain}")
        response = self._call(builders.check_domain(self.domain), DomainCheckResponse)
        logger.info(f"Domain {self.domain} - Available: {response.response.available}")
        return response

    def create_glue_record(self, subdomain: str, ips: Iterable[str]) -> StatusResponse:
        """
        Create a glue record such as ns1.<domain>.

        Args:
            subdomain: Host label of the glue record (e.g. "ns1")
            ips: IPv4 and/or IPv6 addresses
        """
        request = GlueRecord(ips=list(ips))
        return self._call(builders.create_glue_record(self.domain, subdomain, request), StatusResponse)

    def update_glue_record(self, subdomain: str, ips: Iterable[str]) -> StatusResponse:
        """Replace the addresses of an existing glue record"""
        request = GlueRecord(ips=list(ips))
        return self._call(builders.update_glue_record(self.domain, subdomain, request), StatusResponse)

    def delete_glue_record(self, subdomain: str) -> StatusResponse:
        return self._call(builders.delete_glue_record(self.domain, subdomain), StatusResponse)

    def get_glue_records(self) -> List[Tuple[str, GlueRecordIps]]:
        response = self._call(builders.get_glue_records(self.domain), GlueRecordListResponse)
        return response.hosts


class PorkbunDns(DomainScopedClient, RecordManager):
    """DNS and DNSSEC records of one domain"""

    def record_request(
        self,
        record_type: str,
        content: str,
        name: Optional[str] = None,
        ttl: Optional[int] = None,
        priority: Optional[int] = None
    ) -> DnsRecordRequest:
        return DnsRecordRequest(
            name=name,
            record_type=record_type,
            content=content,
            ttl=ttl,
            prio=priority
        )

    def list_records(self) -> List[DnsRecord]:
        """All records of the domain (Porkbun returns them in one response)"""
        response = self._call(builders.retrieve_records(self.domain), DnsRecordListResponse)
        return response.records

    def get_record(self, record_id: int) -> Optional[DnsRecord]:
        """
        Get one record by id.

        Returns:
            The record, or None if Porkbun has no record with that id
        """
        response = self._call(builders.retrieve_records(self.domain, record_id), DnsRecordListResponse)
        return response.records[0] if response.records else None

    def get_records_by_name_type(self, record_type: str, subdomain: Optional[str] = None) -> List[DnsRecord]:
        """
        Records matching a type and subdomain.

        Args:
            record_type: e.g. "A", "CNAME"
            subdomain: Host label; None for the apex
        """
        wire = builders.retrieve_records_by_name_type(self.domain, record_type, subdomain)
        return self._call(wire, DnsRecordListResponse).records

    def create_record(self, request: DnsRecordRequest) -> DnsRecordCreateResponse:
        logger.info(f"Creating {request.record_type} record on {self.domain}")
        response = self._call(builders.create_record(self.domain, request), DnsRecordCreateResponse)
        logger.info(f"Created record {response.id} on {self.domain}")
        return response

    def update_record(self, record_id: int, request: DnsRecordRequest) -> StatusResponse:
        logger.info(f"Editing record {record_id} on {self.domain}")
        return self._call(builders.edit_record(self.domain, record_id, request), StatusResponse)

    def update_records_by_name_type(
        self,
        record_type: str,
        request: EditDnsRecordsByNameType,
        subdomain: Optional[str] = None
    ) -> StatusResponse:
        wire = builders.edit_records_by_name_type(self.domain, record_type, subdomain, request)
        return self._call(wire, StatusResponse)

    def delete_record(self, record_id: int) -> None:
        logger.info(f"Deleting record {record_id} on {self.domain}")
        self._call(builders.delete_record(self.domain, record_id), StatusResponse)

    def delete_records_by_name_type(self, record_type: str, subdomain: Optional[str] = None) -> StatusResponse:
        wire = builders.delete_records_by_name_type(self.domain, record_type, subdomain)
        return self._call(wire, StatusResponse)

    # --- DNSSEC ---

    def create_dnssec_record(self, request: CreateDnssecRecord) -> StatusResponse:
        """Create a DS record at the registry"""
        return self._call(builders.create_dnssec_record(self.domain, request), StatusResponse)

    def get_dnssec_records(self) -> Dict[str, DnssecRecord]:
        """DS records at the registry, keyed by key tag"""
        return self._call(builders.get_dnssec_records(self.domain), DnssecRecordListResponse).records

    def delete_dnssec_record(self, key_tag: str) -> StatusResponse:
        return self._call(builders.delete_dnssec_record(self.domain, key_tag), StatusResponse)


class PorkbunSsl(DomainScopedClient):
    """SSL bundle of one domain"""

    def retrieve_bundle(self) -> SslBundleResponse:
        return self._call(builders.retrieve_ssl_bundle(self.domain), SslBundleResponse)
