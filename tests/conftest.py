"""
Shared fixtures. Every HTTP call goes through a MagicMock session, so no
credentials or network access are needed.
"""

import json
from unittest.mock import MagicMock

import pytest

from registrar.utils.config import reset_settings


@pytest.fixture
def make_response():
    """Factory for fake requests.Response objects"""

    def _response(status_code: int = 200, payload=None, text: str = None):
        response = MagicMock()
        response.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        response.text = text
        return response

    return _response


@pytest.fixture
def session():
    return MagicMock()


@pytest.fixture(autouse=True)
def _fresh_settings():
    reset_settings()
    yield
    reset_settings()
