"""
Input validation utilities for domain names used to scope clients
"""

import re


class DomainValidationError(ValueError):
    """Raised when a domain name cannot be used as a client scope"""
    pass


class DomainValidator:
    """Validator for domain names"""

    # RFC-compliant domain regex; TLD may be alphabetic or an IDN (xn--) label
    DOMAIN_REGEX = re.compile(
        r'^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+(?:[a-z]{2,63}|xn--[a-z0-9-]{1,59})$'
    )

    @classmethod
    def validate(cls, domain: str) -> str:
        """
        Validate a domain name.

        Args:
            domain: Domain name to validate

        Returns:
            Cleaned domain name (lowercase, stripped)

        Raises:
            DomainValidationError: If domain is invalid
        """
        if not domain or not domain.strip():
            raise DomainValidationError("Domain name cannot be empty")

        # Clean the domain
        domain = domain.strip().lower()

        # Remove http(s):// if present
        domain = re.sub(r'^https?://', '', domain)

        # Remove trailing slash and the root dot
        domain = domain.rstrip('/').rstrip('.')

        # Check length
        if len(domain) > 253:  # RFC 1035
            raise DomainValidationError("Domain name too long (max 253 characters)")

        if not cls.DOMAIN_REGEX.match(domain):
            raise DomainValidationError(
                f"Invalid domain format: {domain}. "
                "Domain must contain only letters, numbers, and hyphens."
            )

        return domain


def validate_domain(domain: str) -> str:
    """Convenience function for domain validation"""
    return DomainValidator.validate(domain)
