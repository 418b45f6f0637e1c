"""
Tests for response normalization into models and unified errors.
"""

import pytest

from registrar.api.exceptions import (
    APIError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    SerializationError,
)
from registrar.api.normalizer import normalize
from registrar.api.porkbun.models import PingResponse
from registrar.api.transport import RawResponse


class TestSuccess:

    def test_parses_model(self):
        raw = RawResponse(200, '{"status": "SUCCESS", "yourIp": "203.0.113.7"}')

        result = normalize(raw, PingResponse)

        assert result.your_ip == "203.0.113.7"
        assert result.status == "SUCCESS"

    def test_unknown_fields_ignored(self):
        raw = RawResponse(200, '{"status": "SUCCESS", "yourIp": "1.1.1.1", "xForwardedFor": "x"}')

        assert normalize(raw, PingResponse).your_ip == "1.1.1.1"

    def test_empty_body_without_model(self):
        assert normalize(RawResponse(204, "")) is None

    def test_body_ignored_without_model(self):
        assert normalize(RawResponse(200, '{"status": "SUCCESS"}')) is None

    def test_non_error_status_is_data(self):
        raw = RawResponse(200, '{"status": "pending", "message": "awaiting registry"}')

        assert normalize(raw) is None

    def test_lowercase_success_marker(self):
        raw = RawResponse(200, '{"status": "success", "yourIp": "1.1.1.1"}')

        assert normalize(raw, PingResponse).your_ip == "1.1.1.1"


class TestAPIErrors:

    def test_error_marker_on_http_200(self):
        raw = RawResponse(200, '{"status": "ERROR", "message": "Invalid domain."}')

        with pytest.raises(APIError) as exc_info:
            normalize(raw, PingResponse)

        assert exc_info.value.message == "Invalid domain."
        assert exc_info.value.status_code == 200

    def test_error_marker_on_http_400_keeps_message_verbatim(self):
        message = "Invalid API key. (002)"
        raw = RawResponse(400, f'{{"status": "ERROR", "message": "{message}"}}')

        with pytest.raises(APIError) as exc_info:
            normalize(raw, PingResponse)

        assert exc_info.value.message == message
        assert exc_info.value.response_data["status"] == "ERROR"

    def test_error_marker_without_message(self):
        with pytest.raises(APIError) as exc_info:
            normalize(RawResponse(200, '{"status": "ERROR"}'))

        assert exc_info.value.message == "Unknown API error"

    def test_non_2xx_message_body(self):
        raw = RawResponse(400, '{"message": "Invalid Argument", "details": "ttl too low"}')

        with pytest.raises(APIError) as exc_info:
            normalize(raw)

        assert exc_info.value.message == "Invalid Argument"
        assert exc_info.value.response_data["details"] == "ttl too low"

    def test_non_2xx_without_message_uses_body(self):
        raw = RawResponse(500, '{"error": "boom"}')

        with pytest.raises(APIError) as exc_info:
            normalize(raw)

        assert exc_info.value.message == '{"error": "boom"}'

    def test_non_2xx_empty_body(self):
        with pytest.raises(APIError) as exc_info:
            normalize(RawResponse(502, ""))

        assert exc_info.value.message == "Unknown API error"
        assert exc_info.value.status_code == 502

    @pytest.mark.parametrize("status_code, error_class", [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (404, NotFoundError),
        (429, RateLimitError),
        (500, APIError),
    ])
    def test_status_code_mapping(self, status_code, error_class):
        raw = RawResponse(status_code, '{"message": "nope"}')

        with pytest.raises(error_class):
            normalize(raw)

    def test_str_includes_status(self):
        with pytest.raises(APIError) as exc_info:
            normalize(RawResponse(404, '{"message": "Not Found"}'))

        assert str(exc_info.value) == "NotFoundError (HTTP 404): Not Found"


class TestSerializationErrors:

    def test_empty_body_with_model(self):
        with pytest.raises(SerializationError):
            normalize(RawResponse(200, ""), PingResponse)

    def test_invalid_json(self):
        with pytest.raises(SerializationError):
            normalize(RawResponse(200, "<html>oops</html>"), PingResponse)

    def test_invalid_json_on_error_status(self):
        with pytest.raises(SerializationError):
            normalize(RawResponse(503, "<html>Service Unavailable</html>"))

    def test_shape_mismatch(self):
        raw = RawResponse(200, '{"status": "SUCCESS"}')

        with pytest.raises(SerializationError) as exc_info:
            normalize(raw, PingResponse)

        assert "PingResponse" in exc_info.value.message
