"""Error taxonomy shared by the upstream fetchers and normalization pipelines."""

from __future__ import annotations


class FootydashError(RuntimeError):
    """Base class for failures surfaced to clients as ``{error, details}``."""

    status_code = 500
    error = "Failed to fetch data"

    def __init__(self, details: str, *, error: str | None = None) -> None:
        super().__init__(details)
        self.details = details
        if error is not None:
            self.error = error

    def to_envelope(self) -> dict[str, str]:
        return {"error": self.error, "details": self.details}


class UpstreamUnavailable(FootydashError):
    """Raised when a provider cannot be reached or answers with a non-2xx status."""

    status_code = 502


class MalformedPayload(FootydashError):
    """Raised when a provider answers 2xx but the JSON has an unexpected shape."""

    status_code = 502
    error = "Malformed upstream payload"


class ConfigMissing(FootydashError):
    """Raised when a provider credential is not configured."""

    status_code = 500
    error = "API key not configured"


class ConfigInvalid(FootydashError):
    """Raised when a configured value cannot be used, such as an unknown timezone."""

    status_code = 500
    error = "Invalid configuration"


__all__ = [
    "FootydashError",
    "UpstreamUnavailable",
    "MalformedPayload",
    "ConfigMissing",
    "ConfigInvalid",
]
