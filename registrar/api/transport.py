"""
HTTP Transport Adapter
Sends one authenticated request through a shared requests.Session
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from registrar.api.credentials import Credential
from registrar.api.exceptions import NetworkError
from registrar.utils.logger import get_logger


logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class WireRequest:
    """
    Provider wire shape of one API call, as produced by a request builder.
    `path` is appended to the transport's base URL.
    """
    method: str
    path: str
    params: Optional[Dict[str, Any]] = None
    json_body: Optional[Dict[str, Any]] = None
    authenticated: bool = True


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of an HTTP response"""
    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport:
    """
    Thin wrapper around requests.Session.
    Shared by a root client and all of its scoped clients; it is never
    mutated after construction.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: Optional[Dict[str, str]] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers = {
            "Accept": "application/json",
            **(headers or {})
        }

    def send(self, request: WireRequest, credential: Optional[Credential] = None) -> RawResponse:
        """
        Execute a single HTTP call. Never retries.

        Args:
            request: Builder output (method, path, query params, JSON body)
            credential: Attached only if the request is authenticated

        Returns:
            RawResponse with the status code and body text

        Raises:
            NetworkError: On timeouts, connection/TLS failures and other
                transport-level errors
        """
        url = f"{self.base_url}{request.path}"
        request_kwargs: Dict[str, Any] = {
            "headers": dict(self.headers),
            "params": request.params,
            "json": request.json_body,
            "timeout": self.timeout,
        }
        if credential is not None and request.authenticated:
            credential.attach(request_kwargs)

        logger.debug(f"{request.method} {url}")
        if request.params:
            logger.debug(f"Params: {request.params}")

        try:
            response = self.session.request(request.method, url, **request_kwargs)
        except requests.exceptions.Timeout as e:
            raise NetworkError(f"Request timed out after {self.timeout} seconds") from e
        except requests.exceptions.ConnectionError as e:
            raise NetworkError(f"Connection error: {str(e)}") from e
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Network error: {str(e)}") from e

        logger.debug(f"{request.method} {url} -> {response.status_code}")
        return RawResponse(status_code=response.status_code, body=response.text or "")

    def close(self) -> None:
        self.session.close()
