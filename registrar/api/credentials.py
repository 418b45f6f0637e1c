"""
Registrar credentials
Each credential knows how to attach itself to an outgoing request
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class Credential(BaseModel, ABC):
    """
    Immutable authentication material owned by a root client.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def attach(self, request_kwargs: Dict[str, Any]) -> None:
        """
        Add authentication to the keyword arguments of one
        `requests.Session.request` call.

        Args:
            request_kwargs: Per-call kwargs, built fresh for every request
        """
        pass


class PorkbunCredentials(Credential):
    """Porkbun key pair, embedded in every JSON body"""

    api_key: str = Field(min_length=1)
    secret_api_key: SecretStr

    def body_fields(self) -> Dict[str, str]:
        return {
            "secretapikey": self.secret_api_key.get_secret_value(),
            "apikey": self.api_key,
        }

    def attach(self, request_kwargs: Dict[str, Any]) -> None:
        body = dict(request_kwargs.get("json") or {})
        body.update(self.body_fields())
        request_kwargs["json"] = body


class NameComCredentials(Credential):
    """Name.com username and API token, sent as HTTP basic auth"""

    username: str = Field(min_length=1)
    token: SecretStr

    def attach(self, request_kwargs: Dict[str, Any]) -> None:
        request_kwargs["auth"] = (self.username, self.token.get_secret_value())
