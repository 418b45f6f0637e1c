"""
Name.com request builders
Reads are GETs with query parameters, writes carry camelCase JSON bodies.
Authentication (HTTP basic) is attached by the transport.
"""

from typing import Iterable, List

from registrar.api.name_com import endpoints
from registrar.api.name_com.endpoints import domain_path
from registrar.api.name_com.models import (
    DnssecCreatePayload,
    RecordPayload,
    UpdateDomainPayload,
    UrlForwardingCreatePayload,
    UrlForwardingUpdatePayload,
    VanityNsCreatePayload,
    VanityNsUpdatePayload,
)
from registrar.api.transport import WireRequest


def _page_params(page: int, per_page: int) -> dict:
    return {"page": page, "perPage": per_page}


def _names(values: Iterable[str], field_name: str) -> List[str]:
    names = [v.strip() for v in values if v and v.strip()]
    if not names:
        raise ValueError(f"At least one entry is required in {field_name}")
    return names


def _segment(value, field_name: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"{field_name} is required")
    return text


def hello() -> WireRequest:
    return WireRequest("GET", endpoints.HELLO)


# --- Domains ---

def list_domains(page: int, per_page: int = endpoints.MAX_PER_PAGE) -> WireRequest:
    return WireRequest("GET", endpoints.DOMAINS, params=_page_params(page, per_page))


def get_domain(domain: str) -> WireRequest:
    return WireRequest("GET", domain_path(domain))


def create_domain(domain: str) -> WireRequest:
    return WireRequest("POST", endpoints.DOMAINS, json_body={"domain": {"domainName": domain}})


def update_domain(domain: str, payload: UpdateDomainPayload) -> WireRequest:
    return WireRequest("PATCH", domain_path(domain), json_body=payload.to_wire())


def check_availability(domain_names: Iterable[str]) -> WireRequest:
    body = {"domainNames": _names(domain_names, "domain_names")}
    return WireRequest("POST", endpoints.DOMAINS + endpoints.ACTION_CHECK_AVAILABILITY, json_body=body)


def get_auth_code(domain: str) -> WireRequest:
    return WireRequest("GET", domain_path(domain, endpoints.ACTION_GET_AUTH_CODE))


def set_nameservers(domain: str, nameservers: Iterable[str]) -> WireRequest:
    body = {"nameservers": _names(nameservers, "nameservers")}
    return WireRequest("POST", domain_path(domain, endpoints.ACTION_SET_NAMESERVERS), json_body=body)


# --- DNS records ---

def list_records(domain: str, page: int, per_page: int = endpoints.MAX_PER_PAGE) -> WireRequest:
    return WireRequest("GET", domain_path(domain, endpoints.RECORDS), params=_page_params(page, per_page))


def get_record(domain: str, record_id: int) -> WireRequest:
    return WireRequest("GET", domain_path(domain, f"{endpoints.RECORDS}/{record_id}"))


def create_record(domain: str, payload: RecordPayload) -> WireRequest:
    return WireRequest("POST", domain_path(domain, endpoints.RECORDS), json_body=payload.to_wire())


def update_record(domain: str, record_id: int, payload: RecordPayload) -> WireRequest:
    return WireRequest("PUT", domain_path(domain, f"{endpoints.RECORDS}/{record_id}"), json_body=payload.to_wire())


def delete_record(domain: str, record_id: int) -> WireRequest:
    return WireRequest("DELETE", domain_path(domain, f"{endpoints.RECORDS}/{record_id}"))


# --- DNSSEC ---

def list_dnssec(domain: str, page: int, per_page: int = endpoints.MAX_PER_PAGE) -> WireRequest:
    return WireRequest("GET", domain_path(domain, endpoints.DNSSEC), params=_page_params(page, per_page))


def get_dnssec(domain: str, digest: str) -> WireRequest:
    return WireRequest("GET", domain_path(domain, f"{endpoints.DNSSEC}/{_segment(digest, 'digest')}"))


def create_dnssec(domain: str, payload: DnssecCreatePayload) -> WireRequest:
    return WireRequest("POST", domain_path(domain, endpoints.DNSSEC), json_body=payload.to_wire())


def delete_dnssec(domain: str, digest: str) -> WireRequest:
    return WireRequest("DELETE", domain_path(domain, f"{endpoints.DNSSEC}/{_segment(digest, 'digest')}"))


# --- URL forwarding ---

def list_url_forwarding(domain: str, page: int, per_page: int = endpoints.MAX_PER_PAGE) -> WireRequest:
    return WireRequest("GET", domain_path(domain, endpoints.URL_FORWARDING), params=_page_params(page, per_page))


def get_url_forwarding(domain: str, host: str) -> WireRequest:
    return WireRequest("GET", domain_path(domain, f"{endpoints.URL_FORWARDING}/{_segment(host, 'host')}"))


def create_url_forwarding(domain: str, payload: UrlForwardingCreatePayload) -> WireRequest:
    body = {"domainName": domain, **payload.to_wire()}
    return WireRequest("POST", domain_path(domain, endpoints.URL_FORWARDING), json_body=body)


def update_url_forwarding(domain: str, host: str, payload: UrlForwardingUpdatePayload) -> WireRequest:
    path = domain_path(domain, f"{endpoints.URL_FORWARDING}/{_segment(host, 'host')}")
    return WireRequest("PUT", path, json_body=payload.to_wire())


def delete_url_forwarding(domain: str, host: str) -> WireRequest:
    return WireRequest("DELETE", domain_path(domain, f"{endpoints.URL_FORWARDING}/{_segment(host, 'host')}"))


# --- Vanity nameservers ---

def list_vanity_nameservers(domain: str, page: int, per_page: int = endpoints.MAX_PER_PAGE) -> WireRequest:
    return WireRequest("GET", domain_path(domain, endpoints.VANITY_NAMESERVERS), params=_page_params(page, per_page))


def get_vanity_nameserver(domain: str, hostname: str) -> WireRequest:
    path = domain_path(domain, f"{endpoints.VANITY_NAMESERVERS}/{_segment(hostname, 'hostname')}")
    return WireRequest("GET", path)


def create_vanity_nameserver(domain: str, payload: VanityNsCreatePayload) -> WireRequest:
    return WireRequest("POST", domain_path(domain, endpoints.VANITY_NAMESERVERS), json_body=payload.to_wire())


def update_vanity_nameserver(domain: str, hostname: str, payload: VanityNsUpdatePayload) -> WireRequest:
    path = domain_path(domain, f"{endpoints.VANITY_NAMESERVERS}/{_segment(hostname, 'hostname')}")
    return WireRequest("PUT", path, json_body=payload.to_wire())


def delete_vanity_nameserver(domain: str, hostname: str) -> WireRequest:
    path = domain_path(domain, f"{endpoints.VANITY_NAMESERVERS}/{_segment(hostname, 'hostname')}")
    return WireRequest("DELETE", path)
