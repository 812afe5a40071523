"""Shared error types for the gateway."""

from __future__ import annotations

from typing import Any


class GatewayError(Exception):
    """Base error for all gateway failures."""


class MissingContentError(GatewayError):
    """A capability call lacks its required content and was not dispatched."""

    def __init__(self, field: str, capability: str = "") -> None:
        self.field = field
        self.capability = capability
        msg = f"Missing required content: {field}"
        if capability:
            msg += f" ({capability})"
        super().__init__(msg)


class UnsupportedOperationError(GatewayError):
    """The provider does not serve the requested operation."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"Unsupported operation: {operation}" + (f" ({detail})" if detail else ""))


class ProviderResponseError(GatewayError):
    """The provider answered, but signaled an application-level failure.

    Carries the provider-reported status and its structured error body so the
    dispatcher can preserve both in the envelope.
    """

    def __init__(self, status: int, body: Any = None) -> None:
        self.status = status
        self.body = body
        super().__init__(f"Provider responded with status {status}")


class ArtifactError(GatewayError):
    """Fetching or persisting a single generated artifact failed."""

    def __init__(self, index: int, detail: str = "") -> None:
        self.index = index
        self.detail = detail
        super().__init__(f"Artifact {index} failed" + (f": {detail}" if detail else ""))


class ConfigError(GatewayError):
    """Gateway configuration could not be read or validated."""
