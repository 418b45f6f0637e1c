"""
Tests for the command-line interface.
The registrar client is replaced by a MagicMock.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest

import main
from registrar.api.exceptions import APIError
from registrar.api.porkbun.models import DnsRecord, DomainInfo
from registrar.utils.logger import set_level


def _client():
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    return client


@pytest.fixture
def client():
    mock_client = _client()
    with patch("main.get_registrar", return_value=mock_client) as factory:
        mock_client.factory = factory
        yield mock_client


def test_no_command_prints_help():
    with pytest.raises(SystemExit) as exc_info:
        main.main([])

    assert exc_info.value.code == 0


def test_domain_list(client):
    client.domains.return_value.list_domains.return_value = [
        DomainInfo(domain="example.com", status="ACTIVE", expire_date="2027-01-01 00:00:00"),
    ]

    main.main(["--provider", "PORKBUN", "domain", "list"])

    client.factory.assert_called_once_with("PORKBUN")
    client.domains.return_value.list_domains.assert_called_once()
    client.__exit__.assert_called_once()


def test_dns_list(client):
    client.dns.return_value.list_records.return_value = [
        DnsRecord(id="1", name="example.com", record_type="A", content="192.0.2.1", ttl="600"),
    ]

    main.main(["dns", "list", "example.com"])

    client.dns.assert_called_once_with("example.com")
    client.factory.assert_called_once_with(None)


def test_dns_create(client, capsys):
    dns = client.dns.return_value
    dns.create_record.return_value.id = 99

    main.main(["dns", "create", "example.com", "MX", "mx.example.net", "--name", "mail", "--priority", "10"])

    dns.record_request.assert_called_once_with(
        record_type="MX",
        content="mx.example.net",
        name="mail",
        ttl=None,
        priority=10
    )
    dns.create_record.assert_called_once_with(dns.record_request.return_value)
    assert "99" in capsys.readouterr().out


def test_dns_delete(client, capsys):
    main.main(["dns", "delete", "example.com", "42"])

    client.dns.return_value.delete_record.assert_called_once_with(42)
    assert "Deleted record 42" in capsys.readouterr().out


def test_registrar_error_exits_with_1(client):
    client.ping.side_effect = APIError("Invalid API key. (002)", status_code=400)

    with pytest.raises(SystemExit) as exc_info:
        main.main(["ping"])

    assert exc_info.value.code == 1


def test_configuration_error_exits_with_1():
    with patch("main.get_registrar", side_effect=ValueError("Porkbun credentials missing")):
        with pytest.raises(SystemExit) as exc_info:
            main.main(["domain", "list"])

    assert exc_info.value.code == 1


def test_log_level_flag_reaches_cli_logger(client):
    try:
        main.main(["--log-level", "ERROR", "dns", "delete", "example.com", "42"])

        assert main.logger.level == logging.ERROR
        assert logging.getLogger("registrar.api.transport").level == logging.ERROR
    finally:
        set_level("INFO")


def test_log_level_from_settings(client, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    try:
        main.main(["dns", "delete", "example.com", "42"])

        assert main.logger.level == logging.WARNING
    finally:
        set_level("INFO")
