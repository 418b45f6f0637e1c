"""
Name.com scoped clients
Created through NameComClient.domains(), .domain(), .dns(),
.url_forwarding() and .vanity_ns()
"""

from typing import Callable, Iterable, List, Optional, Type

from registrar.api.base_provider import (
    DomainLister,
    DomainScopedClient,
    RecordManager,
    ScopedClient,
)
from registrar.api.name_com import builders, endpoints
from registrar.api.name_com.models import (
    AvailabilityResult,
    CheckAvailabilityResponse,
    CreateDomainResponse,
    DnsRecord,
    DnssecCreatePayload,
    DnssecRecord,
    Domain,
    GetAuthCodeResponse,
    ListDnsRecordsResponse,
    ListDnssecResponse,
    ListDomainsResponse,
    ListUrlForwardingResponse,
    ListVanityNsResponse,
    Paged,
    RecordPayload,
    UpdateDomainPayload,
    UrlForwardingCreatePayload,
    UrlForwardingRecord,
    UrlForwardingUpdatePayload,
    VanityNameserver,
    VanityNsCreatePayload,
    VanityNsUpdatePayload,
)
from registrar.api.pagination import Page, collect_all, next_page_number
from registrar.api.transport import WireRequest
from registrar.utils.logger import get_logger
from registrar.utils.validators import validate_domain


logger = get_logger(__name__)


class PagedListingMixin:
    """Follows Name.com page numbers (starting at 1) until the listing ends"""

    def _collect_pages(
        self,
        build: Callable[[int], WireRequest],
        model: Type[Paged],
        items_field: str
    ) -> list:
        def fetch(page: int) -> Page:
            response = self._call(build(page), model)
            items = getattr(response, items_field)
            return Page(
                items=items,
                next_cursor=next_page_number(page, items, endpoints.MAX_PER_PAGE, response.next_page)
            )

        return collect_all(fetch, start=1)


class NameComDomains(PagedListingMixin, ScopedClient, DomainLister):
    """Account-scoped domain operations"""

    def list_domains(self) -> List[Domain]:
        """
        Get every domain in the account, following all pages.

        Returns:
            List of Domain
        """
        logger.info("Fetching owned domains from Name.com")
        domains = self._collect_pages(builders.list_domains, ListDomainsResponse, "domains")
        logger.info(f"Found {len(domains)} domains in Name.com account")
        return domains

    def check_availability(self, domain_names: Iterable[str]) -> List[AvailabilityResult]:
        """
        Check whether domains can be registered.

        Args:
            domain_names: Up to 50 domain names

        Returns:
            One AvailabilityResult per name Name.com could evaluate
        """
        names = [validate_domain(name) for name in domain_names]
        logger.info(f"Checking availability for: {', '.join(names)}")
        response = self._call(builders.check_availability(names), CheckAvailabilityResponse)
        return response.results

    def create(self, domain_name: str) -> CreateDomainResponse:
        """
        Register a domain. On the development host this is only simulated.
        """
        domain_name = validate_domain(domain_name)
        logger.warning(f"Registering domain {domain_name} - this places an order")
        response = self._call(builders.create_domain(domain_name), CreateDomainResponse)
        logger.info(f"Domain {domain_name} registered (order {response.order})")
        return response

    def domain(self, domain_name: str) -> "NameComDomain":
        return NameComDomain(self._client, domain_name)


class NameComDomain(DomainScopedClient):
    """Operations on one domain"""

    def get(self) -> Domain:
        logger.info(f"Getting details for: {self.domain}")
        return self._call(builders.get_domain(self.domain), Domain)

    def update(self, payload: UpdateDomainPayload) -> Domain:
        """Change autorenew, lock and privacy flags; unset flags are left alone"""
        return self._call(builders.update_domain(self.domain, payload), Domain)

    def get_auth_code(self) -> str:
        """Transfer authorization (EPP) code"""
        return self._call(builders.get_auth_code(self.domain), GetAuthCodeResponse).auth_code

    def set_nameservers(self, nameservers: Iterable[str]) -> Domain:
        logger.info(f"Updating nameservers for {self.domain}")
        return self._call(builders.set_nameservers(self.domain, nameservers), Domain)


class NameComDns(PagedListingMixin, DomainScopedClient, RecordManager):
    """DNS and DNSSEC records of one domain"""

    def record_request(
        self,
        record_type: str,
        content: str,
        name: Optional[str] = None,
        ttl: Optional[int] = None,
        priority: Optional[int] = None
    ) -> RecordPayload:
        fields = {"host": name, "record_type": record_type, "answer": content, "priority": priority}
        if ttl is not None:
            fields["ttl"] = ttl
        return RecordPayload(**fields)

    def list_records(self) -> List[DnsRecord]:
        """All records of the domain, following all pages"""
        return self._collect_pages(
            lambda page: builders.list_records(self.domain, page),
            ListDnsRecordsResponse,
            "records"
        )

    def get_record(self, record_id: int) -> DnsRecord:
        return self._call(builders.get_record(self.domain, record_id), DnsRecord)

    def create_record(self, payload: RecordPayload) -> DnsRecord:
        logger.info(f"Creating {payload.record_type} record on {self.domain}")
        record = self._call(builders.create_record(self.domain, payload), DnsRecord)
        logger.info(f"Created record {record.id} on {self.domain}")
        return record

    def update_record(self, record_id: int, payload: RecordPayload) -> DnsRecord:
        logger.info(f"Updating record {record_id} on {self.domain}")
        return self._call(builders.update_record(self.domain, record_id, payload), DnsRecord)

    def delete_record(self, record_id: int) -> None:
        logger.info(f"Deleting record {record_id} on {self.domain}")
        self._call(builders.delete_record(self.domain, record_id))

    # --- DNSSEC ---

    def list_dnssec(self) -> List[DnssecRecord]:
        return self._collect_pages(
            lambda page: builders.list_dnssec(self.domain, page),
            ListDnssecResponse,
            "dnssec"
        )

    def get_dnssec(self, digest: str) -> DnssecRecord:
        return self._call(builders.get_dnssec(self.domain, digest), DnssecRecord)

    def create_dnssec(self, payload: DnssecCreatePayload) -> DnssecRecord:
        return self._call(builders.create_dnssec(self.domain, payload), DnssecRecord)

    def delete_dnssec(self, digest: str) -> None:
        self._call(builders.delete_dnssec(self.domain, digest))


class NameComUrlForwarding(PagedListingMixin, DomainScopedClient):
    """URL forwarding rules of one domain"""

    def list(self) -> List[UrlForwardingRecord]:
        return self._collect_pages(
            lambda page: builders.list_url_forwarding(self.domain, page),
            ListUrlForwardingResponse,
            "url_forwarding"
        )

    def get(self, host: str) -> UrlForwardingRecord:
        """
        Args:
            host: Full hostname of the rule (e.g. "www.example.org")
        """
        return self._call(builders.get_url_forwarding(self.domain, host), UrlForwardingRecord)

    def create(self, payload: UrlForwardingCreatePayload) -> UrlForwardingRecord:
        logger.info(f"Forwarding {payload.host} -> {payload.forwards_to}")
        return self._call(builders.create_url_forwarding(self.domain, payload), UrlForwardingRecord)

    def update(self, host: str, payload: UrlForwardingUpdatePayload) -> UrlForwardingRecord:
        return self._call(builders.update_url_forwarding(self.domain, host, payload), UrlForwardingRecord)

    def delete(self, host: str) -> None:
        self._call(builders.delete_url_forwarding(self.domain, host))


class NameComVanityNameservers(PagedListingMixin, DomainScopedClient):
    """Vanity nameservers (glue) of one domain"""

    def list(self) -> List[VanityNameserver]:
        return self._collect_pages(
            lambda page: builders.list_vanity_nameservers(self.domain, page),
            ListVanityNsResponse,
            "vanity_nameservers"
        )

    def get(self, hostname: str) -> VanityNameserver:
        return self._call(builders.get_vanity_nameserver(self.domain, hostname), VanityNameserver)

    def create(self, payload: VanityNsCreatePayload) -> VanityNameserver:
        return self._call(builders.create_vanity_nameserver(self.domain, payload), VanityNameserver)

    def update(self, hostname: str, payload: VanityNsUpdatePayload) -> VanityNameserver:
        return self._call(builders.update_vanity_nameserver(self.domain, hostname, payload), VanityNameserver)

    def delete(self, hostname: str) -> None:
        self._call(builders.delete_vanity_nameserver(self.domain, hostname))
