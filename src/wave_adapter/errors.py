"""Error taxonomy for the adapter.

Every failure the adapter reports carries an HTTP status, a message, an
optional ``details`` mapping (upstream error lists, rejected fields) and an
optional machine-readable ``code``. The API layer renders these uniformly.

Ambiguity ("please choose one of these") is NOT an error; see
``wave_adapter.entities.SelectionRequired``.
"""

from typing import Any

ErrorDetail = dict[str, Any]


class AdapterError(Exception):
    """Base class for all adapter failures."""

    status_code: int = 500
    code: str | None = None

    def __init__(
        self,
        message: str,
        details: ErrorDetail | None = None,
        status_code: int | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class UnauthorizedError(AdapterError):
    """Missing or invalid caller credential."""

    status_code = 401


class NotFoundError(AdapterError):
    """An explicitly referenced record does not exist."""

    status_code = 404


class ConfigError(AdapterError):
    """Required credential or configuration is absent."""

    status_code = 500
    code = "CONFIG_ERROR"


class UpstreamError(AdapterError):
    """The Accounting Service failed at transport or GraphQL level."""

    status_code = 502
    code = "WAVE_ERROR"


class UpstreamInputRejected(UpstreamError):
    """The Accounting Service rejected the payload's field-level content."""

    status_code = 400
    code = "WAVE_INPUT_ERROR"
