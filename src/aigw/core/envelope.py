"""ResponseEnvelope: the single normalized outcome of a dispatch attempt.

Callers branch on ``status`` alone. Whether a failure came from the provider
(application failure) or from the call itself (transport/unexpected failure)
only shows in the shape of ``data``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

GENERIC_FAILURE_MESSAGE = "An error occurred during your request."
TRANSPORT_FAILURE_STATUS = 500


class ResponseEnvelope(BaseModel):
    """Immutable result of one dispatcher invocation.

    - ``status``: provider status, or 500 for transport/unexpected failures.
    - ``data``: raw provider payload on success, error body or diagnostic on failure.
    - ``result``: best-effort extraction for the operation, ``None`` when absent.
    - ``message``: human-readable summary, only set for transport failures.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: int
    data: Any = None
    result: Any = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_retryable(self) -> bool:
        """5xx by convention; 4xx means the caller has to fix the request."""
        return self.status >= 500

    @classmethod
    def success(cls, status: int, data: Any, result: Any = None) -> ResponseEnvelope:
        return cls(status=status, data=data, result=result)

    @classmethod
    def application_failure(cls, status: int, body: Any) -> ResponseEnvelope:
        return cls(status=status, data=body)

    @classmethod
    def transport_failure(cls, exc: BaseException) -> ResponseEnvelope:
        return cls(
            status=TRANSPORT_FAILURE_STATUS,
            data=str(exc) or type(exc).__name__,
            message=GENERIC_FAILURE_MESSAGE,
        )
