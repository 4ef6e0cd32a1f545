"""
Unit tests for CEP syntax validation and inbound body decoding.

Tests cover:
- The eight-digit pattern (no normalization)
- Decoding of the gateway's JSON body
- Mapping of every rejection to "invalid zipcode"
"""

import pytest

from gateway.src.services import parse_cep_request
from shared.models import CEP_PATTERN, ErrorKind, OutwardError, is_valid_cep


class TestCepPattern:
    """Test the shared CEP pattern."""

    @pytest.mark.parametrize(
        "cep",
        ["29902555", "00000000", "99999999", "01001000", "12345678"],
    )
    def test_eight_digits_are_valid(self, cep):
        """Any string of exactly eight ASCII digits passes."""
        assert is_valid_cep(cep) is True

    @pytest.mark.parametrize(
        "cep",
        [
            "",
            "123",
            "1234567",
            "123456789",
            "29902-555",
            "29.902555",
            " 29902555",
            "29902555 ",
            "29902555\n",
            "abcdefgh",
            "2990255a",
            "+2990255",
            "١٢٣٤٥٦٧٨",  # Arabic-Indic digits are not ASCII
            "２９９０２５５５",  # full-width digits
        ],
    )
    def test_everything_else_is_invalid(self, cep):
        """Too short, too long, separators, whitespace, non-ASCII digits."""
        assert is_valid_cep(cep) is False

    def test_non_string_is_invalid(self):
        assert is_valid_cep(29902555) is False  # type: ignore[arg-type]
        assert is_valid_cep(None) is False  # type: ignore[arg-type]

    def test_pattern_is_anchored(self):
        assert CEP_PATTERN.pattern == r"^\d{8}$"
        assert CEP_PATTERN.search("x29902555") is None


class TestParseCepRequest:
    """Test decoding of the gateway request body."""

    def test_valid_body_returns_cep_unchanged(self):
        assert parse_cep_request(b'{"cep": "29902555"}') == "29902555"

    def test_extra_fields_are_ignored(self):
        assert parse_cep_request(b'{"cep": "29902555", "country": "BR"}') == "29902555"

    @pytest.mark.parametrize(
        "body",
        [
            b"",
            b"not json",
            b'{"cep": ',
            b"[]",
            b'"29902555"',
            b'{"cep": 29902555}',
            b'{"cep": null}',
            b"{}",
            b'{"cep": "123"}',
            b'{"cep": "29902-555"}',
            b'{"cep": "1234567890"}',
        ],
    )
    def test_rejected_bodies_raise_invalid_zipcode(self, body):
        """Decode failures and pattern failures look the same to the client."""
        with pytest.raises(OutwardError) as exc_info:
            parse_cep_request(body)

        error = exc_info.value
        assert error.kind is ErrorKind.INVALID_ZIPCODE
        assert error.status_code == 422
        assert error.to_response() == {"error": "invalid zipcode"}
