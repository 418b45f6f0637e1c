"""
Name.com request and response models
"""

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import Field

from registrar.api.models import NonEmptyStr, RecordValue, RequestModel, ResponseModel


class Hello(ResponseModel):
    """Connectivity check result"""
    motd: str = ""
    server_name: str
    server_time: str
    username: str


class Paged(ResponseModel):
    next_page: Optional[int] = None
    last_page: Optional[int] = None


# --- DNS ---

class DnsRecord(ResponseModel):
    """`host` is absent for apex records; `priority` only for MX/SRV"""
    id: int
    domain_name: str
    host: Optional[str] = None
    fqdn: str
    record_type: str = Field(alias="type")
    answer: str
    ttl: int
    priority: Optional[int] = None

    def as_row(self) -> Tuple[str, ...]:
        priority = "" if self.priority is None else str(self.priority)
        return (str(self.id), self.fqdn, self.record_type, self.answer, str(self.ttl), priority)


class ListDnsRecordsResponse(Paged):
    records: List[DnsRecord] = Field(default_factory=list)


class RecordPayload(RequestModel):
    """Create/update body; Name.com defaults and floors ttl at 300"""
    host: Optional[str] = None
    record_type: NonEmptyStr = Field(alias="type")
    answer: RecordValue
    ttl: int = Field(default=300, ge=300)
    priority: Optional[int] = None


class DnssecRecord(ResponseModel):
    domain_name: str
    key_tag: int
    algorithm: int
    digest_type: int
    digest: str


class ListDnssecResponse(Paged):
    dnssec: List[DnssecRecord] = Field(default_factory=list)


class DnssecCreatePayload(RequestModel):
    key_tag: int
    algorithm: int
    digest_type: int
    digest: NonEmptyStr


# --- Domains ---

class Contacts(ResponseModel):
    """Contact blocks are passed through as returned"""
    registrant: Optional[Dict[str, Any]] = None
    admin: Optional[Dict[str, Any]] = None
    tech: Optional[Dict[str, Any]] = None
    billing: Optional[Dict[str, Any]] = None


class Domain(ResponseModel):
    domain_name: str
    create_date: Optional[str] = None
    expire_date: Optional[str] = None
    autorenew_enabled: bool = False
    locked: bool = False
    privacy_enabled: bool = False
    contacts: Optional[Contacts] = None
    nameservers: List[str] = Field(default_factory=list)
    renewal_price: Optional[float] = None

    def as_row(self) -> Tuple[str, ...]:
        return (self.domain_name, "locked" if self.locked else "unlocked", self.expire_date or "")


class ListDomainsResponse(Paged):
    domains: List[Domain] = Field(default_factory=list)


class CreateDomainResponse(ResponseModel):
    domain: Domain
    order: int
    total_paid: float


class UpdateDomainPayload(RequestModel):
    """Only the flags that are set are sent"""
    autorenew_enabled: Optional[bool] = None
    locked: Optional[bool] = None
    privacy_enabled: Optional[bool] = None


class GetAuthCodeResponse(ResponseModel):
    auth_code: str


class AvailabilityResult(ResponseModel):
    """Name.com leaves out false flags and prices it does not know"""
    domain_name: str
    sld: Optional[str] = None
    tld: Optional[str] = None
    purchasable: bool = False
    premium: bool = False
    purchase_price: Optional[float] = None
    purchase_type: Optional[str] = None
    renewal_price: Optional[float] = None


class CheckAvailabilityResponse(ResponseModel):
    results: List[AvailabilityResult] = Field(default_factory=list)


# --- URL forwarding ---

ForwardType = Literal["redirect", "masked", "302"]


class UrlForwardingRecord(ResponseModel):
    domain_name: str
    host: str
    forwards_to: str
    forward_type: str = Field(alias="type")
    title: Optional[str] = None
    meta: Optional[str] = None


class ListUrlForwardingResponse(Paged):
    url_forwarding: List[UrlForwardingRecord] = Field(default_factory=list)


class UrlForwardingCreatePayload(RequestModel):
    """`domainName` comes from the scoped client"""
    host: NonEmptyStr
    forwards_to: NonEmptyStr
    forward_type: ForwardType = Field(alias="type")
    title: Optional[str] = None
    meta: Optional[str] = None


class UrlForwardingUpdatePayload(RequestModel):
    forwards_to: NonEmptyStr
    forward_type: ForwardType = Field(alias="type")
    title: Optional[str] = None
    meta: Optional[str] = None


# --- Vanity nameservers ---

class VanityNameserver(ResponseModel):
    domain_name: str
    hostname: str
    ips: List[str] = Field(default_factory=list)


class ListVanityNsResponse(Paged):
    vanity_nameservers: List[VanityNameserver] = Field(default_factory=list)


class VanityNsCreatePayload(RequestModel):
    hostname: NonEmptyStr
    ips: List[NonEmptyStr] = Field(min_length=1)


class VanityNsUpdatePayload(RequestModel):
    ips: List[NonEmptyStr] = Field(min_length=1)
