"""
Porkbun request builders
Every Porkbun call is a POST with a JSON body; the key pair is added to
the body by the transport, not here.
"""

from typing import Iterable, Optional

from registrar.api.porkbun import endpoints
from registrar.api.porkbun.models import (
    AddUrlForward,
    CreateDnssecRecord,
    DnsRecordRequest,
    EditDnsRecordsByNameType,
    GlueRecord,
)
from registrar.api.transport import WireRequest


def _post(path: str, body: Optional[dict] = None, authenticated: bool = True) -> WireRequest:
    return WireRequest("POST", path, json_body=body or {}, authenticated=authenticated)


def _path(prefix: str, *segments) -> str:
    return prefix + "/".join(str(s) for s in segments if s not in (None, ""))


# --- General ---

def ping() -> WireRequest:
    return _post(endpoints.PING)


def get_pricing() -> WireRequest:
    return _post(endpoints.PRICING_GET, authenticated=False)


# --- Domains ---

def list_domains(start: int, include_labels: bool = False) -> WireRequest:
    body = {"start": str(start)}
    if include_labels:
        body["includeLabels"] = "yes"
    return _post(endpoints.DOMAIN_LIST_ALL, body)


def update_nameservers(domain: str, nameservers: Iterable[str]) -> WireRequest:
    ns = [n.strip() for n in nameservers if n and n.strip()]
    if not ns:
        raise ValueError("At least one nameserver is required")
    return _post(_path(endpoints.DOMAIN_UPDATE_NS, domain), {"ns": ns})


def get_nameservers(domain: str) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_GET_NS, domain))


def add_url_forward(domain: str, request: AddUrlForward) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_ADD_URL_FORWARD, domain), request.to_wire())


def get_url_forwarding(domain: str) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_GET_URL_FORWARDING, domain))


def delete_url_forward(domain: str, record_id: int) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_DELETE_URL_FORWARD, domain, record_id))


def check_domain(domain: str) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_CHECK, domain))


def create_glue_record(domain: str, subdomain: str, request: GlueRecord) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_CREATE_GLUE, domain, _required(subdomain, "subdomain")), request.to_wire())


def update_glue_record(domain: str, subdomain: str, request: GlueRecord) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_UPDATE_GLUE, domain, _required(subdomain, "subdomain")), request.to_wire())


def delete_glue_record(domain: str, subdomain: str) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_DELETE_GLUE, domain, _required(subdomain, "subdomain")))


def get_glue_records(domain: str) -> WireRequest:
    return _post(_path(endpoints.DOMAIN_GET_GLUE, domain))


# --- DNS ---

def create_record(domain: str, request: DnsRecordRequest) -> WireRequest:
    return _post(_path(endpoints.DNS_CREATE, domain), request.to_wire())


def edit_record(domain: str, record_id: int, request: DnsRecordRequest) -> WireRequest:
    return _post(_path(endpoints.DNS_EDIT_BY_ID, domain, record_id), request.to_wire())


def edit_records_by_name_type(
    domain: str,
    record_type: str,
    subdomain: Optional[str],
    request: EditDnsRecordsByNameType
) -> WireRequest:
    path = _path(endpoints.DNS_EDIT_BY_NAME_TYPE, domain, _required(record_type, "record_type"), subdomain)
    return _post(path, request.to_wire())


def delete_record(domain: str, record_id: int) -> WireRequest:
    return _post(_path(endpoints.DNS_DELETE_BY_ID, domain, record_id))


def delete_records_by_name_type(domain: str, record_type: str, subdomain: Optional[str] = None) -> WireRequest:
    return _post(_path(endpoints.DNS_DELETE_BY_NAME_TYPE, domain, _required(record_type, "record_type"), subdomain))


def retrieve_records(domain: str, record_id: Optional[int] = None) -> WireRequest:
    return _post(_path(endpoints.DNS_RETRIEVE, domain, record_id))


def retrieve_records_by_name_type(domain: str, record_type: str, subdomain: Optional[str] = None) -> WireRequest:
    return _post(_path(endpoints.DNS_RETRIEVE_BY_NAME_TYPE, domain, _required(record_type, "record_type"), subdomain))


def create_dnssec_record(domain: str, request: CreateDnssecRecord) -> WireRequest:
    return _post(_path(endpoints.DNSSEC_CREATE, domain), request.to_wire())


def get_dnssec_records(domain: str) -> WireRequest:
    return _post(_path(endpoints.DNSSEC_GET, domain))


def delete_dnssec_record(domain: str, key_tag: str) -> WireRequest:
    return _post(_path(endpoints.DNSSEC_DELETE, domain, _required(key_tag, "key_tag")))


# --- SSL ---

def retrieve_ssl_bundle(domain: str) -> WireRequest:
    return _post(_path(endpoints.SSL_RETRIEVE_BUNDLE, domain))


def _required(value, field_name: str) -> str:
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"{field_name} is required")
    return text
