"""Envelope, operation enumeration, errors and configuration."""

from aigw.core.config import GatewayConfig, TelemetrySettings, load_config
from aigw.core.envelope import GENERIC_FAILURE_MESSAGE, ResponseEnvelope
from aigw.core.errors import (
    ArtifactError,
    ConfigError,
    GatewayError,
    MissingContentError,
    ProviderResponseError,
    UnsupportedOperationError,
)
from aigw.core.operations import Operation

__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "ArtifactError",
    "ConfigError",
    "GatewayConfig",
    "GatewayError",
    "MissingContentError",
    "Operation",
    "ProviderResponseError",
    "ResponseEnvelope",
    "TelemetrySettings",
    "UnsupportedOperationError",
    "load_config",
]
