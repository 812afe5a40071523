"""Gateway configuration: provider choice, credentials, artifact output."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from aigw.core.errors import ConfigError

DEFAULT_API_BASE = "https://api.openai.com/v1"


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class GatewayConfig(BaseModel):
    """Process-wide settings, read once at startup and never mutated by calls."""

    provider: Literal["openai", "litellm"] = "openai"
    api_key: str | None = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = 600.0
    output_dir: Path = Path(".")
    image_basename: str = "image"
    image_extension: str = ".jpg"
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> GatewayConfig:
        """Build a config from ``OPENAI_API_KEY``, ``OPENAI_API_BASE`` and ``AIGW_PROVIDER``."""
        values: dict[str, Any] = {}
        if api_key := os.environ.get("OPENAI_API_KEY"):
            values["api_key"] = api_key
        if api_base := os.environ.get("OPENAI_API_BASE"):
            values["api_base"] = api_base
        if provider := os.environ.get("AIGW_PROVIDER"):
            values["provider"] = provider
        values.update(overrides)
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc


def load_config(path: Path) -> GatewayConfig:
    """Read a YAML config file, interpolate env vars, and validate.

    Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
    using :func:`os.path.expandvars` before YAML parsing. Keys absent from the
    file fall back to :meth:`GatewayConfig.from_env`.

    Raises:
        ConfigError: On read errors, YAML parse errors or validation failures.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise ConfigError(f"YAML parse error: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config YAML must be a mapping")

    return GatewayConfig.from_env(**data)
