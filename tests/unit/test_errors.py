"""
Unit tests for the error taxonomy.
"""

import pytest

from shared.models import AdapterError, AdapterFailure, ErrorKind, OutwardError


class TestErrorKind:
    """Test outward error kinds."""

    @pytest.mark.parametrize(
        "kind, status_code, message",
        [
            (ErrorKind.INVALID_ZIPCODE, 422, "invalid zipcode"),
            (ErrorKind.ZIPCODE_NOT_FOUND, 404, "can not find zipcode"),
            (ErrorKind.INTERNAL, 500, "internal server error"),
        ],
    )
    def test_status_and_default_message(self, kind, status_code, message):
        assert kind.status_code == status_code
        assert kind.default_message == message

    @pytest.mark.parametrize(
        "status_code, kind",
        [
            (422, ErrorKind.INVALID_ZIPCODE),
            (404, ErrorKind.ZIPCODE_NOT_FOUND),
            (500, ErrorKind.INTERNAL),
            (502, ErrorKind.INTERNAL),
            (400, ErrorKind.INTERNAL),
        ],
    )
    def test_from_status(self, status_code, kind):
        assert ErrorKind.from_status(status_code) is kind


class TestOutwardError:
    """Test outward errors and their response bodies."""

    def test_factories(self):
        assert OutwardError.invalid_zipcode().to_response() == {"error": "invalid zipcode"}
        assert OutwardError.zipcode_not_found().to_response() == {"error": "can not find zipcode"}

        internal = OutwardError.internal("failed to call resolution service: refused")
        assert internal.status_code == 500
        assert internal.to_response() == {"error": "failed to call resolution service: refused"}

    def test_explicit_status_overrides_kind(self):
        error = OutwardError(ErrorKind.INTERNAL, "bad gateway", status_code=502)

        assert error.status_code == 502
        assert str(error) == "bad gateway"

    def test_empty_message_uses_default(self):
        assert OutwardError(ErrorKind.ZIPCODE_NOT_FOUND, "").message == "can not find zipcode"


class TestAdapterError:
    """Test adapter errors."""

    def test_detail_is_kept_out_of_failure(self):
        error = AdapterError(AdapterFailure.TRANSPORT_FAILURE, "directory returned 503")

        assert error.failure is AdapterFailure.TRANSPORT_FAILURE
        assert error.detail == "directory returned 503"
        assert str(error) == "transport_failure: directory returned 503"

    def test_without_detail(self):
        assert str(AdapterError(AdapterFailure.NOT_FOUND)) == "not_found"
