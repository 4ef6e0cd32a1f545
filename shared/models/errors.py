"""Error taxonomy shared by the gateway and the resolver.

Two layers of errors exist:

- ``AdapterError`` is raised by upstream adapters and carries a closed
  ``AdapterFailure`` kind. It never crosses a service boundary.
- ``OutwardError`` is the only error a service turns into an HTTP response.
  Its body is always ``{"error": message}``.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """Outward error kinds with their default status and message."""

    INVALID_ZIPCODE = (422, "invalid zipcode")
    ZIPCODE_NOT_FOUND = (404, "can not find zipcode")
    INTERNAL = (500, "internal server error")

    def __init__(self, status_code: int, default_message: str) -> None:
        self.status_code = status_code
        self.default_message = default_message

    @classmethod
    def from_status(cls, status_code: int) -> "ErrorKind":
        """Infer the kind from an HTTP status relayed by another service."""
        for kind in cls:
            if kind.status_code == status_code:
                return kind
        return cls.INTERNAL


class OutwardError(Exception):
    """Error that maps directly onto an HTTP response."""

    def __init__(
        self,
        kind: ErrorKind,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.kind = kind
        self.message = message or kind.default_message
        self.status_code = status_code or kind.status_code
        super().__init__(self.message)

    @classmethod
    def invalid_zipcode(cls) -> "OutwardError":
        return cls(ErrorKind.INVALID_ZIPCODE)

    @classmethod
    def zipcode_not_found(cls) -> "OutwardError":
        return cls(ErrorKind.ZIPCODE_NOT_FOUND)

    @classmethod
    def internal(cls, message: str) -> "OutwardError":
        return cls(ErrorKind.INTERNAL, message)

    def to_response(self) -> dict:
        return {"error": self.message}


class AdapterFailure(str, Enum):
    """Closed set of failures an upstream adapter can report."""

    NOT_FOUND = "not_found"
    TRANSPORT_FAILURE = "transport_failure"
    INVALID_INPUT = "invalid_input"


class AdapterError(Exception):
    """Failure reported by an upstream adapter.

    ``detail`` is meant for logs and spans only.
    """

    def __init__(self, failure: AdapterFailure, detail: str = "") -> None:
        self.failure = failure
        self.detail = detail
        super().__init__(f"{failure.value}: {detail}" if detail else failure.value)
