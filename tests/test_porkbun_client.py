"""
Tests for PorkbunClient and its scoped clients.
All HTTP calls go through a MagicMock session.

Run:
    python -m pytest tests/test_porkbun_client.py -v
"""

import pytest

from registrar.api.base_provider import DomainLister, RecordManager
from registrar.api.exceptions import APIError, AuthenticationError, SerializationError
from registrar.api.porkbun import PorkbunClient
from registrar.utils.validators import DomainValidationError


BASE_URL = "https://api.porkbun.com/api/json/v3"


def _domains(start: int, count: int) -> list:
    return [{"domain": f"site{i}.com", "status": "ACTIVE", "tld": "com"} for i in range(start, start + count)]


@pytest.fixture
def client(session):
    return PorkbunClient("pk1_test", "sk1_test", session=session)


class TestPing:

    def test_ping_sends_keys(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS", "yourIp": "203.0.113.7"})

        response = client.ping()

        assert response.your_ip == "203.0.113.7"
        args, kwargs = session.request.call_args
        assert args == ("POST", f"{BASE_URL}/ping")
        assert kwargs["json"] == {"apikey": "pk1_test", "secretapikey": "sk1_test"}

    def test_invalid_key_message_is_verbatim(self, client, session, make_response):
        session.request.return_value = make_response(400, {"status": "ERROR", "message": "Invalid API key. (002)"})

        with pytest.raises(APIError) as exc_info:
            client.ping()

        assert exc_info.value.message == "Invalid API key. (002)"

    def test_forbidden(self, client, session, make_response):
        session.request.return_value = make_response(403, {"status": "ERROR", "message": "API access disabled"})

        with pytest.raises(AuthenticationError):
            client.ping()

    def test_pricing_is_sent_without_keys(self, client, session, make_response):
        session.request.return_value = make_response(200, {
            "status": "SUCCESS",
            "pricing": {"com": {"registration": "9.68", "renewal": "9.68", "transfer": "9.68"}},
        })

        pricing = client.get_pricing()

        assert pricing.pricing["com"].registration == "9.68"
        assert session.request.call_args.kwargs["json"] == {}


class TestListDomains:

    def test_aggregates_every_page(self, client, session, make_response):
        """1000 + 1000 + 3 domains, then an empty page, take four listAll calls."""
        session.request.side_effect = [
            make_response(200, {"status": "SUCCESS", "domains": _domains(0, 1000)}),
            make_response(200, {"status": "SUCCESS", "domains": _domains(1000, 1000)}),
            make_response(200, {"status": "SUCCESS", "domains": _domains(2000, 3)}),
            make_response(200, {"status": "SUCCESS", "domains": []}),
        ]

        domains = client.domains().list_domains()

        assert len(domains) == 2003
        assert domains[0].domain == "site0.com"
        assert domains[-1].domain == "site2002.com"
        starts = [c.kwargs["json"]["start"] for c in session.request.call_args_list]
        assert starts == ["0", "1000", "2000", "2003"]

    def test_probes_after_full_page(self, client, session, make_response):
        session.request.side_effect = [
            make_response(200, {"status": "SUCCESS", "domains": _domains(0, 1000)}),
            make_response(200, {"status": "SUCCESS", "domains": []}),
        ]

        assert len(client.domains().list_domains()) == 1000
        assert session.request.call_count == 2

    def test_smaller_pages_are_not_the_end(self, client, session, make_response):
        """A page below 1000 domains is followed until Porkbun returns an empty one."""
        session.request.side_effect = [
            make_response(200, {"status": "SUCCESS", "domains": _domains(0, 500)}),
            make_response(200, {"status": "SUCCESS", "domains": _domains(500, 200)}),
            make_response(200, {"status": "SUCCESS", "domains": []}),
        ]

        domains = client.domains().list_domains()

        assert len(domains) == 700
        assert domains[-1].domain == "site699.com"
        starts = [c.kwargs["json"]["start"] for c in session.request.call_args_list]
        assert starts == ["0", "500", "700"]

    def test_error_mid_listing_propagates(self, client, session, make_response):
        session.request.side_effect = [
            make_response(200, {"status": "SUCCESS", "domains": _domains(0, 1000)}),
            make_response(503, {"status": "ERROR", "message": "Service temporarily unavailable"}),
        ]

        with pytest.raises(APIError):
            client.domains().list_domains()

    def test_is_domain_lister(self, client):
        assert isinstance(client.domains(), DomainLister)


class TestDns:

    def test_scoped_clients_are_isolated(self, client, session, make_response):
        session.request.side_effect = [
            make_response(200, {"status": "SUCCESS", "id": 111}),
            make_response(200, {"status": "SUCCESS", "id": 222}),
        ]
        dns_a = client.dns("a.com")
        dns_b = client.dns("b.com")

        created_a = dns_a.create_record(dns_a.record_request("A", "192.0.2.1"))
        created_b = dns_b.create_record(dns_b.record_request("A", "192.0.2.2", name="www"))

        first, second = session.request.call_args_list
        assert first.args[1] == f"{BASE_URL}/dns/create/a.com"
        assert first.kwargs["json"]["content"] == "192.0.2.1"
        assert "name" not in first.kwargs["json"]
        assert second.args[1] == f"{BASE_URL}/dns/create/b.com"
        assert second.kwargs["json"]["content"] == "192.0.2.2"
        assert second.kwargs["json"]["name"] == "www"
        assert (created_a.id, created_b.id) == (111, 222)

    def test_creating_scoped_client_makes_no_call(self, client, session):
        client.dns("example.com")
        client.domain("example.com")
        client.domains()

        session.request.assert_not_called()

    def test_domain_is_normalized(self, client):
        assert client.dns(" Example.COM. ").domain == "example.com"

    def test_invalid_domain(self, client):
        with pytest.raises(DomainValidationError):
            client.dns("not a domain")

    def test_list_records(self, client, session, make_response):
        session.request.return_value = make_response(200, {
            "status": "SUCCESS",
            "records": [
                {"id": "106926652", "name": "example.com", "type": "A", "content": "192.0.2.1", "ttl": "600", "prio": "0", "notes": ""},
                {"id": 106926659, "name": "www.example.com", "type": "CNAME", "content": "example.com", "ttl": 600},
            ],
        })

        records = client.dns("example.com").list_records()

        assert [r.id for r in records] == ["106926652", "106926659"]
        assert records[1].ttl == "600"
        assert records[0].as_row() == ("106926652", "example.com", "A", "192.0.2.1", "600", "0")

    def test_get_record_missing_returns_none(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS", "records": []})

        assert client.dns("example.com").get_record(42) is None
        assert session.request.call_args.args[1] == f"{BASE_URL}/dns/retrieve/example.com/42"

    def test_update_record(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS"})
        dns = client.dns("example.com")

        dns.update_record(42, dns.record_request("A", "192.0.2.9", ttl=900))

        kwargs = session.request.call_args.kwargs
        assert session.request.call_args.args[1] == f"{BASE_URL}/dns/edit/example.com/42"
        assert kwargs["json"]["ttl"] == "900"

    def test_delete_record_returns_none(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS"})

        assert client.dns("example.com").delete_record(42) is None

    def test_create_record_bad_response(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS"})
        dns = client.dns("example.com")

        with pytest.raises(SerializationError):
            dns.create_record(dns.record_request("A", "192.0.2.1"))

    def test_empty_dnssec_list(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS", "records": []})

        assert client.dns("example.com").get_dnssec_records() == {}

    def test_is_record_manager(self, client):
        assert isinstance(client.dns("example.com"), RecordManager)


class TestDomain:

    def test_check_domain(self, client, session, make_response):
        session.request.return_value = make_response(200, {
            "status": "SUCCESS",
            "response": {"avail": "yes", "type": "registration", "price": "9.68", "premium": "no"},
            "limits": {"TTL": "10", "limit": "1", "used": 1, "naturalLanguage": "1 out of 1 checks within 10 seconds used."},
        })

        result = client.domain("example.com").check()

        assert result.response.available
        assert result.limits.ttl == "10"

    def test_nameservers(self, client, session, make_response):
        session.request.return_value = make_response(200, {"status": "SUCCESS", "ns": ["curitiba.ns.porkbun.com"]})

        assert client.domain("example.com").get_nameservers() == ["curitiba.ns.porkbun.com"]

    def test_glue_records(self, client, session, make_response):
        session.request.return_value = make_response(200, {
            "status": "SUCCESS",
            "hosts": [["ns1.example.com", {"v4": ["192.0.2.1"], "v6": []}]],
        })

        hosts = client.domain("example.com").get_glue_records()

        assert hosts[0][0] == "ns1.example.com"
        assert hosts[0][1].v4 == ["192.0.2.1"]


class TestLifecycle:

    def test_context_manager_closes_session(self, session):
        with PorkbunClient("pk1_test", "sk1_test", session=session) as client:
            assert client.get_provider_name() == "Porkbun"

        session.close.assert_called_once()

    def test_secret_is_hidden_in_repr(self, client):
        assert "sk1_test" not in repr(client.credential)
