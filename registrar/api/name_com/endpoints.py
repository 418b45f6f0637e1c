"""
Name.com Core API v1 endpoint paths
"""

HELLO = "/core/v1/hello"

DOMAINS = "/core/v1/domains"

# Appended to DOMAINS/{domainName}
RECORDS = "/records"
DNSSEC = "/dnssec"
URL_FORWARDING = "/url/forwarding"
VANITY_NAMESERVERS = "/vanity_nameservers"

# Custom-method actions, appended to a domain or collection path
ACTION_CHECK_AVAILABILITY = ":checkAvailability"
ACTION_GET_AUTH_CODE = ":getAuthCode"
ACTION_SET_NAMESERVERS = ":setNameservers"

# Largest page size the listing endpoints accept
MAX_PER_PAGE = 1000


def domain_path(domain: str, suffix: str = "") -> str:
    return f"{DOMAINS}/{domain}{suffix}"
