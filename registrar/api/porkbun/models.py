"""
Porkbun request and response models
Porkbun sends most scalars as strings ("600", "1", "yes"); numbers are
accepted and kept as strings so the wire shape is mirrored as-is.
"""

from typing import Dict, List, Literal, Optional, Tuple

from pydantic import ConfigDict, Field, IPvAnyAddress, field_validator

from registrar.api.models import NonEmptyStr, RecordValue, RequestModel, ResponseModel


class PorkbunResponse(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    status: str


class PorkbunRequest(RequestModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)


# --- General ---

class StatusResponse(PorkbunResponse):
    """Bare status for endpoints that return nothing else"""
    message: Optional[str] = None


class PingResponse(PorkbunResponse):
    your_ip: str


class TldPricing(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    registration: Optional[str] = None
    renewal: Optional[str] = None
    transfer: Optional[str] = None


class PricingResponse(PorkbunResponse):
    """Pricing keyed by TLD (e.g. "com")"""
    pricing: Dict[str, TldPricing] = Field(default_factory=dict)


# --- DNS ---

class DnsRecord(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    name: str
    record_type: str = Field(alias="type")
    content: str
    ttl: Optional[str] = None
    prio: Optional[str] = None
    notes: Optional[str] = None

    def as_row(self) -> Tuple[str, ...]:
        return (self.id, self.name, self.record_type, self.content, self.ttl or "", self.prio or "")


class DnsRecordListResponse(PorkbunResponse):
    records: List[DnsRecord] = Field(default_factory=list)


class DnsRecordCreateResponse(PorkbunResponse):
    id: int


class DnsRecordRequest(PorkbunRequest):
    """
    Create or edit-by-id payload.
    `name` is the subdomain label; leave it out for the apex.
    """
    name: Optional[str] = None
    record_type: NonEmptyStr = Field(alias="type")
    content: RecordValue
    ttl: Optional[str] = None
    prio: Optional[str] = None
    notes: Optional[str] = None


class EditDnsRecordsByNameType(PorkbunRequest):
    """Payload for editing every record matching a name and type"""
    content: RecordValue
    ttl: Optional[str] = None
    prio: Optional[str] = None
    notes: Optional[str] = None


# --- DNSSEC ---

class DnssecRecord(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    key_tag: str
    alg: str
    digest_type: str
    digest: str
    max_sig_life: Optional[str] = None
    key_data_flags: Optional[str] = None
    key_data_protocol: Optional[str] = None
    key_data_algo: Optional[str] = None
    key_data_pub_key: Optional[str] = None


class CreateDnssecRecord(PorkbunRequest):
    key_tag: NonEmptyStr
    alg: NonEmptyStr
    digest_type: NonEmptyStr
    digest: NonEmptyStr
    max_sig_life: Optional[str] = None
    key_data_flags: Optional[str] = None
    key_data_protocol: Optional[str] = None
    key_data_algo: Optional[str] = None
    key_data_pub_key: Optional[str] = None


class DnssecRecordListResponse(PorkbunResponse):
    """DNSSEC records keyed by key tag"""
    records: Dict[str, DnssecRecord] = Field(default_factory=dict)

    @field_validator("records", mode="before")
    @classmethod
    def _empty_list_as_map(cls, value):
        # An account with no DNSSEC records gets [] instead of {}
        if isinstance(value, list) and not value:
            return {}
        return value


# --- Domains ---

class NameserverListResponse(PorkbunResponse):
    ns: List[str] = Field(default_factory=list)


class Label(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    title: str
    color: Optional[str] = None


class DomainInfo(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    domain: str
    status: Optional[str] = None
    tld: Optional[str] = None
    create_date: Optional[str] = None
    expire_date: Optional[str] = None
    security_lock: Optional[str] = None
    whois_privacy: Optional[str] = None
    auto_renew: Optional[str] = None
    not_local: Optional[str] = None
    labels: List[Label] = Field(default_factory=list)

    def as_row(self) -> Tuple[str, ...]:
        return (self.domain, self.status or "", self.expire_date or "")


class DomainListResponse(PorkbunResponse):
    domains: List[DomainInfo] = Field(default_factory=list)


# --- URL forwarding ---

class UrlForwardRecord(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    id: str
    subdomain: str = ""
    location: str
    forward_type: str = Field(alias="type")
    include_path: Optional[str] = None
    wildcard: Optional[str] = None


class UrlForwardListResponse(PorkbunResponse):
    forwards: List[UrlForwardRecord] = Field(default_factory=list)


class AddUrlForward(PorkbunRequest):
    """Leave `subdomain` out to forward the apex"""
    subdomain: Optional[str] = None
    location: NonEmptyStr
    forward_type: Literal["temporary", "permanent"] = Field(alias="type")
    include_path: Literal["yes", "no"] = "no"
    wildcard: Literal["yes", "no"] = "no"


# --- Availability ---

class PriceInfo(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    price_type: Optional[str] = Field(default=None, alias="type")
    price: Optional[str] = None
    regular_price: Optional[str] = None


class AdditionalPricing(ResponseModel):
    renewal: Optional[PriceInfo] = None
    transfer: Optional[PriceInfo] = None


class DomainAvailability(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    avail: str
    price_type: Optional[str] = Field(default=None, alias="type")
    price: Optional[str] = None
    first_year_promo: Optional[str] = None
    regular_price: Optional[str] = None
    premium: Optional[str] = None
    additional: Optional[AdditionalPricing] = None

    @property
    def available(self) -> bool:
        return self.avail.lower() == "yes"


class RateLimitInfo(ResponseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    ttl: Optional[str] = Field(default=None, alias="TTL")
    limit: Optional[str] = None
    used: Optional[int] = None
    natural_language: Optional[str] = None


class DomainCheckResponse(PorkbunResponse):
    response: DomainAvailability
    limits: Optional[RateLimitInfo] = None


# --- Glue records ---

class GlueRecord(PorkbunRequest):
    ips: List[IPvAnyAddress] = Field(min_length=1)


class GlueRecordIps(ResponseModel):
    v4: List[str] = Field(default_factory=list)
    v6: List[str] = Field(default_factory=list)


class GlueRecordListResponse(PorkbunResponse):
    """`hosts` is a list of [hostname, {"v4": [...], "v6": [...]}] pairs"""
    hosts: List[Tuple[str, GlueRecordIps]] = Field(default_factory=list)


# --- SSL ---

class SslBundleResponse(PorkbunResponse):
    """PEM-encoded certificate chain and key pair"""
    certificatechain: str
    privatekey: str
    publickey: str
