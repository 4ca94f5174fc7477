"""Exception types surfaced at the HTTP service boundary."""

from __future__ import annotations


class FaleproxyError(Exception):
    """Base class for every error Faleproxy raises on purpose."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, str]:
        return {"error": self.message}


class ValidationError(FaleproxyError):
    """The request did not carry a usable URL."""

    status_code = 400

    def __init__(self, message: str = "URL is required") -> None:
        super().__init__(message)


class FetchError(FaleproxyError):
    """The target URL could not be retrieved (transport, DNS, HTTP status, timeout)."""

    status_code = 500

    def to_payload(self) -> dict[str, str]:
        return {"error": f"Failed to fetch content: {self.message}"}
