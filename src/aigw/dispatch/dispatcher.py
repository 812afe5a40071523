"""RequestDispatcher: the single seam between adapters and the provider.

Every invocation returns a :class:`~aigw.core.envelope.ResponseEnvelope`;
nothing raised by the provider escapes past this boundary.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from aigw.core.envelope import ResponseEnvelope
from aigw.core.errors import ProviderResponseError, UnsupportedOperationError
from aigw.core.operations import Operation
from aigw.dispatch.models import FileRequest
from aigw.providers.base import CapabilityProvider, ProviderResponse
from aigw.utils.telemetry import ATTR_FILE_BEARING, ATTR_OPERATION, ATTR_STATUS, get_tracer

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

ProviderCall = Callable[..., Awaitable[ProviderResponse]]


class RequestDispatcher:
    """Invokes bound provider operations and normalizes every outcome.

    Two variants:

    - :meth:`send` passes one parameters mapping.
    - :meth:`send_with_file` expands a :class:`FileRequest` into the
      positional ``(stream, model, opt0, opt1, opt2[, opt3])`` shape.

    Usage::

        dispatcher = RequestDispatcher(provider)
        envelope = await dispatcher.send(Operation.CREATE_COMPLETION, {...})
        if envelope.ok:
            print(envelope.result)
    """

    def __init__(self, provider: CapabilityProvider) -> None:
        self._provider = provider
        self._bindings = _bind_operations(provider)

    @property
    def provider(self) -> CapabilityProvider:
        return self._provider

    async def send(self, operation: Operation, params: Mapping[str, Any]) -> ResponseEnvelope:
        """Invoke *operation* with a single parameters mapping."""
        return await self._invoke(
            operation,
            file_bearing=False,
            described=params,
            call=lambda fn: fn(params),
        )

    async def send_with_file(self, operation: Operation, request: FileRequest) -> ResponseEnvelope:
        """Invoke a stream-bearing *operation* with positional arguments."""
        return await self._invoke(
            operation,
            file_bearing=True,
            described=request.describe(),
            call=lambda fn: fn(*request.positional_args()),
        )

    async def _invoke(
        self,
        operation: Operation,
        *,
        file_bearing: bool,
        described: Mapping[str, Any],
        call: Callable[[ProviderCall], Awaitable[ProviderResponse]],
    ) -> ResponseEnvelope:
        params_json = _to_log_json(described)
        logger.info("dispatch start: operation=%s params=%s", operation.value, params_json)

        with _tracer.start_as_current_span("aigw.dispatch") as span:
            span.set_attribute(ATTR_OPERATION, operation.value)
            span.set_attribute(ATTR_FILE_BEARING, file_bearing)
            try:
                if operation.file_bearing != file_bearing:
                    raise UnsupportedOperationError(operation.value, "wrong dispatch variant")
                response = await call(self._bindings[operation])
                envelope = ResponseEnvelope.success(
                    response.status,
                    response.data,
                    operation.extract_result(response.data),
                )
            except ProviderResponseError as exc:
                envelope = ResponseEnvelope.application_failure(exc.status, exc.body)
            except Exception as exc:
                logger.warning(
                    "dispatch failed: operation=%s error=%s",
                    operation.value,
                    exc,
                    exc_info=True,
                )
                envelope = ResponseEnvelope.transport_failure(exc)
            span.set_attribute(ATTR_STATUS, envelope.status)

        logger.info(
            "dispatch end: operation=%s params=%s status=%s",
            operation.value,
            params_json,
            envelope.status,
        )
        return envelope


def _bind_operations(provider: CapabilityProvider) -> dict[Operation, ProviderCall]:
    """Resolve every operation to a provider method, or reject the provider."""
    bindings: dict[Operation, ProviderCall] = {}
    for operation in Operation:
        method = getattr(provider, operation.method_name, None)
        if not callable(method):
            raise UnsupportedOperationError(
                operation.value,
                f"{type(provider).__name__} has no {operation.method_name}()",
            )
        bindings[operation] = method
    return bindings


def _to_log_json(params: Mapping[str, Any]) -> str:
    try:
        return json.dumps(dict(params), default=_log_default)
    except (TypeError, ValueError):
        # non-string keys or cycles
        return repr(dict(params))


def _log_default(value: Any) -> str:
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return f"<{type(value).__name__} {name}>"
    return repr(value)
