"""
Porkbun API v3 endpoint paths
Paths ending in "/" take the domain (and optional extra segments) appended.
"""

# General
PING = "/ping"
PRICING_GET = "/pricing/get"

# Domain
DOMAIN_LIST_ALL = "/domain/listAll"
DOMAIN_UPDATE_NS = "/domain/updateNs/"
DOMAIN_GET_NS = "/domain/getNs/"
DOMAIN_ADD_URL_FORWARD = "/domain/addUrlForward/"
DOMAIN_GET_URL_FORWARDING = "/domain/getUrlForwarding/"
DOMAIN_DELETE_URL_FORWARD = "/domain/deleteUrlForward/"
DOMAIN_CHECK = "/domain/checkDomain/"
DOMAIN_CREATE_GLUE = "/domain/createGlue/"
DOMAIN_UPDATE_GLUE = "/domain/updateGlue/"
DOMAIN_DELETE_GLUE = "/domain/deleteGlue/"
DOMAIN_GET_GLUE = "/domain/getGlue/"

# DNS
DNS_CREATE = "/dns/create/"
DNS_EDIT_BY_ID = "/dns/edit/"
DNS_EDIT_BY_NAME_TYPE = "/dns/editByNameType/"
DNS_DELETE_BY_ID = "/dns/delete/"
DNS_DELETE_BY_NAME_TYPE = "/dns/deleteByNameType/"
DNS_RETRIEVE = "/dns/retrieve/"
DNS_RETRIEVE_BY_NAME_TYPE = "/dns/retrieveByNameType/"
DNSSEC_CREATE = "/dns/createDnssecRecord/"
DNSSEC_GET = "/dns/getDnssecRecords/"
DNSSEC_DELETE = "/dns/deleteDnssecRecord/"

# SSL
SSL_RETRIEVE_BUNDLE = "/ssl/retrieve/"
