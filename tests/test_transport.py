"""
Tests for the HTTP transport adapter.
"""

import pytest
import requests

from registrar.api.credentials import NameComCredentials, PorkbunCredentials
from registrar.api.exceptions import NetworkError
from registrar.api.transport import Transport, WireRequest


BASE_URL = "https://api.example.test/v3/"


class TestSend:

    def test_builds_url_and_passes_timeout(self, session, make_response):
        session.request.return_value = make_response(200, {"ok": True})
        transport = Transport(BASE_URL, session=session, timeout=12.5)

        raw = transport.send(WireRequest("GET", "/hello", params={"page": 1}))

        args, kwargs = session.request.call_args
        assert args == ("GET", "https://api.example.test/v3/hello")
        assert kwargs["params"] == {"page": 1}
        assert kwargs["timeout"] == 12.5
        assert kwargs["headers"]["Accept"] == "application/json"
        assert raw.status_code == 200
        assert raw.ok

    def test_porkbun_keys_merged_into_body(self, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS"})
        transport = Transport(BASE_URL, session=session)
        credential = PorkbunCredentials(api_key="pk1_abc", secret_api_key="sk1_def")
        request = WireRequest("POST", "/dns/create/example.com", json_body={"type": "A", "content": "1.2.3.4"})

        transport.send(request, credential)

        body = session.request.call_args.kwargs["json"]
        assert body == {
            "type": "A",
            "content": "1.2.3.4",
            "apikey": "pk1_abc",
            "secretapikey": "sk1_def",
        }
        # builder output is left untouched
        assert request.json_body == {"type": "A", "content": "1.2.3.4"}

    def test_name_com_basic_auth(self, session, make_response):
        session.request.return_value = make_response(200, {})
        transport = Transport(BASE_URL, session=session)
        credential = NameComCredentials(username="alice", token="tok-123")

        transport.send(WireRequest("GET", "/core/v1/hello"), credential)

        assert session.request.call_args.kwargs["auth"] == ("alice", "tok-123")

    def test_unauthenticated_request_skips_credential(self, session, make_response):
        session.request.return_value = make_response(200, {})
        transport = Transport(BASE_URL, session=session)
        credential = PorkbunCredentials(api_key="pk1_abc", secret_api_key="sk1_def")

        transport.send(WireRequest("POST", "/pricing/get", json_body={}, authenticated=False), credential)

        assert session.request.call_args.kwargs["json"] == {}

    def test_credentials_do_not_leak_between_calls(self, session, make_response):
        session.request.return_value = make_response(200, {})
        transport = Transport(BASE_URL, session=session)
        credential = NameComCredentials(username="alice", token="tok-123")

        transport.send(WireRequest("GET", "/a"), credential)
        transport.send(WireRequest("GET", "/b"))

        assert "auth" not in session.request.call_args.kwargs

    def test_missing_body_text_is_empty(self, session, make_response):
        response = make_response(204)
        response.text = None
        session.request.return_value = response
        transport = Transport(BASE_URL, session=session)

        raw = transport.send(WireRequest("DELETE", "/x"))

        assert raw.body == ""


class TestNetworkErrors:

    @pytest.mark.parametrize("error", [
        requests.exceptions.Timeout("read timed out"),
        requests.exceptions.ConnectionError("connection refused"),
        requests.exceptions.SSLError("bad certificate"),
        requests.exceptions.TooManyRedirects("loop"),
    ])
    def test_transport_failures_become_network_error(self, session, error):
        session.request.side_effect = error
        transport = Transport(BASE_URL, session=session)

        with pytest.raises(NetworkError):
            transport.send(WireRequest("GET", "/hello"))

    def test_no_retry(self, session):
        session.request.side_effect = requests.exceptions.Timeout("read timed out")
        transport = Transport(BASE_URL, session=session)

        with pytest.raises(NetworkError):
            transport.send(WireRequest("GET", "/hello"))

        assert session.request.call_count == 1
