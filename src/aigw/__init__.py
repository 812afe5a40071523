"""aigw: one uniform async contract over heterogeneous generative-AI capabilities."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from aigw.capabilities.gateway import Gateway as Gateway
    from aigw.core.config import GatewayConfig as GatewayConfig
    from aigw.core.envelope import ResponseEnvelope as ResponseEnvelope

_LAZY_EXPORTS = {
    "Gateway": "aigw.capabilities.gateway",
    "GatewayConfig": "aigw.core.config",
    "ResponseEnvelope": "aigw.core.envelope",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'aigw' has no attribute {name!r}")
