"""
Unified exceptions for registrar API operations

Every provider reports failures through one of three kinds:
NetworkError (transport), SerializationError (response shape) and
APIError (the registrar understood and rejected the request).
"""


class RegistrarError(Exception):
    """Base exception for all registrar client errors"""

    def __init__(self, message: str, status_code: int = None, response_data=None):
        self.message = message
        self.status_code = status_code
        self.response_data = response_data if response_data is not None else {}
        super().__init__(self.message)

    def __str__(self):
        name = self.__class__.__name__
        if self.status_code:
            return f"{name} (HTTP {self.status_code}): {self.message}"
        return f"{name}: {self.message}"


class NetworkError(RegistrarError):
    """Raised when network/connection errors occur (DNS, TLS, timeouts)"""
    pass


class SerializationError(RegistrarError):
    """Raised when a response body is not JSON or does not match the expected model"""
    pass


class APIError(RegistrarError):
    """
    Raised when the registrar rejects a request.
    `message` is the registrar's own text, unmodified.
    """
    pass


class AuthenticationError(APIError):
    """Raised when API authentication fails (HTTP 401/403)"""
    pass


class NotFoundError(APIError):
    """Raised when the requested resource does not exist (HTTP 404)"""
    pass


class RateLimitError(APIError):
    """Raised when API rate limit is exceeded (HTTP 429)"""
    pass
