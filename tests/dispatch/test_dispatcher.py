"""Tests for RequestDispatcher: both variants, normalization and logging."""

from __future__ import annotations

import io
import logging
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from aigw.core.envelope import GENERIC_FAILURE_MESSAGE
from aigw.core.errors import ProviderResponseError, UnsupportedOperationError
from aigw.core.operations import Operation
from aigw.dispatch.dispatcher import RequestDispatcher
from aigw.dispatch.models import FileRequest
from aigw.providers.base import ProviderResponse


def _mock_provider(response: ProviderResponse | None = None) -> MagicMock:
    provider = MagicMock()
    for op in Operation:
        setattr(
            provider,
            op.method_name,
            AsyncMock(return_value=response or ProviderResponse(status=200, data={})),
        )
    return provider


class TestConstruction:
    def test_rejects_provider_missing_an_operation(self) -> None:
        class Partial:
            async def create_completion(self, params: object) -> ProviderResponse:
                return ProviderResponse()

        with pytest.raises(UnsupportedOperationError, match="create_chat_completion"):
            RequestDispatcher(Partial())  # type: ignore[arg-type]

    def test_exposes_provider(self) -> None:
        provider = _mock_provider()
        assert RequestDispatcher(provider).provider is provider


class TestSend:
    async def test_success_envelope(self) -> None:
        payload = {"choices": [{"text": "Dear mom,"}]}
        provider = _mock_provider(ProviderResponse(status=200, data=payload))
        dispatcher = RequestDispatcher(provider)

        env = await dispatcher.send(Operation.CREATE_COMPLETION, {"prompt": "hi"})

        assert env.status == 200
        assert env.data == payload
        assert env.result == "Dear mom,"
        assert env.message is None
        provider.create_completion.assert_awaited_once_with({"prompt": "hi"})

    async def test_missing_result_fields_degrade(self) -> None:
        provider = _mock_provider(ProviderResponse(status=200, data={"unexpected": True}))
        env = await RequestDispatcher(provider).send(Operation.CREATE_EDIT, {})
        assert env.status == 200
        assert env.result is None

    async def test_application_failure_preserves_status_and_body(self) -> None:
        body = {"error": {"message": "Rate limit reached", "type": "requests"}}
        provider = _mock_provider()
        provider.create_chat_completion = AsyncMock(side_effect=ProviderResponseError(429, body))

        env = await RequestDispatcher(provider).send(Operation.CREATE_CHAT_COMPLETION, {"messages": []})

        assert env.status == 429
        assert env.data == body
        assert env.message is None

    async def test_plain_fault_becomes_500(self) -> None:
        provider = _mock_provider()
        provider.create_image = AsyncMock(side_effect=RuntimeError("client misconfigured"))

        env = await RequestDispatcher(provider).send(Operation.CREATE_IMAGE, {"prompt": "sun"})

        assert env.status == 500
        assert env.data == "client misconfigured"
        assert env.message == GENERIC_FAILURE_MESSAGE

    async def test_transport_error_becomes_500(self) -> None:
        provider = _mock_provider()
        provider.create_completion = AsyncMock(side_effect=httpx.ConnectError("unreachable"))

        env = await RequestDispatcher(provider).send(Operation.CREATE_COMPLETION, {})

        assert env.status == 500
        assert "unreachable" in env.data

    async def test_file_bearing_operation_rejected_by_simple_variant(self) -> None:
        provider = _mock_provider()
        env = await RequestDispatcher(provider).send(Operation.CREATE_TRANSCRIPTION, {})
        assert env.status == 500
        provider.create_transcription.assert_not_awaited()

    async def test_status_is_provider_status_or_500(self) -> None:
        for side_effect, expected in [
            (None, 201),
            (ProviderResponseError(404, {"error": "nope"}), 404),
            (ValueError("bad"), 500),
        ]:
            provider = _mock_provider(ProviderResponse(status=201, data={}))
            if side_effect is not None:
                provider.create_edit = AsyncMock(side_effect=side_effect)
            env = await RequestDispatcher(provider).send(Operation.CREATE_EDIT, {})
            assert env.status == expected


class TestSendWithFile:
    async def test_expands_positional_arguments_without_fourth_option(self) -> None:
        provider = _mock_provider(ProviderResponse(status=200, data={"text": "hello"}))
        stream = io.BytesIO(b"audio")
        request = FileRequest(file=stream, model="whisper-1", options=("prompt", "json", 0.5))

        env = await RequestDispatcher(provider).send_with_file(Operation.CREATE_TRANSCRIPTION, request)

        provider.create_transcription.assert_awaited_once()
        args = provider.create_transcription.await_args.args
        assert args == (stream, "whisper-1", "prompt", "json", 0.5)
        assert env.status == 200
        assert env.result == "hello"

    async def test_includes_fourth_option_when_present(self) -> None:
        provider = _mock_provider()
        stream = io.BytesIO(b"audio")
        request = FileRequest(file=stream, model="whisper-1", options=("p", "json", 0.5, "en"))

        await RequestDispatcher(provider).send_with_file(Operation.CREATE_TRANSCRIPTION, request)

        args = provider.create_transcription.await_args.args
        assert args == (stream, "whisper-1", "p", "json", 0.5, "en")

    async def test_failure_normalized(self) -> None:
        provider = _mock_provider()
        provider.create_transcription = AsyncMock(
            side_effect=ProviderResponseError(400, {"error": "Invalid file format."})
        )
        request = FileRequest(file=io.BytesIO(b""), model="whisper-1", options=("p", "json", 0.5))

        env = await RequestDispatcher(provider).send_with_file(Operation.CREATE_TRANSCRIPTION, request)

        assert env.status == 400
        assert env.data == {"error": "Invalid file format."}

    async def test_simple_operation_rejected_by_file_variant(self) -> None:
        provider = _mock_provider()
        request = FileRequest(file=io.BytesIO(b""), model="m")
        env = await RequestDispatcher(provider).send_with_file(Operation.CREATE_COMPLETION, request)
        assert env.status == 500
        provider.create_completion.assert_not_awaited()


class TestLogging:
    async def test_start_and_end_lines(self, caplog: pytest.LogCaptureFixture) -> None:
        provider = _mock_provider(ProviderResponse(status=200, data={}))
        with caplog.at_level(logging.INFO, logger="aigw.dispatch.dispatcher"):
            await RequestDispatcher(provider).send(Operation.CREATE_EDIT, {"instruction": "Fix spelling"})

        messages = [r.getMessage() for r in caplog.records if r.name == "aigw.dispatch.dispatcher"]
        assert len(messages) == 2
        assert messages[0].startswith("dispatch start: operation=createEdit")
        assert '"instruction": "Fix spelling"' in messages[0]
        assert messages[1].startswith("dispatch end: operation=createEdit")
        assert messages[1].endswith("status=200")

    async def test_end_line_carries_failure_status(self, caplog: pytest.LogCaptureFixture) -> None:
        provider = _mock_provider()
        provider.create_completion = AsyncMock(side_effect=ProviderResponseError(429, {}))
        with caplog.at_level(logging.INFO, logger="aigw.dispatch.dispatcher"):
            await RequestDispatcher(provider).send(Operation.CREATE_COMPLETION, {})

        assert caplog.records[-1].getMessage().endswith("status=429")

    async def test_file_rendered_by_name(self, caplog: pytest.LogCaptureFixture) -> None:
        provider = _mock_provider()
        stream = io.BytesIO(b"audio")
        stream.name = "example.mp3"
        request = FileRequest(file=stream, model="whisper-1", options=("p", "json", 0.5))
        with caplog.at_level(logging.INFO, logger="aigw.dispatch.dispatcher"):
            await RequestDispatcher(provider).send_with_file(Operation.CREATE_TRANSCRIPTION, request)

        assert "example.mp3" in caplog.records[0].getMessage()

    async def test_non_string_keys_still_dispatched(self, caplog: pytest.LogCaptureFixture) -> None:
        provider = _mock_provider(ProviderResponse(status=200, data={"choices": [{"text": "ok"}]}))
        params = {"model": "m", "logit_bias": {(1, 2): 1}}
        with caplog.at_level(logging.INFO, logger="aigw.dispatch.dispatcher"):
            env = await RequestDispatcher(provider).send(Operation.CREATE_COMPLETION, params)

        assert env.status == 200
        assert env.result == "ok"
        provider.create_completion.assert_awaited_once_with(params)
        assert "(1, 2)" in caplog.records[0].getMessage()

    async def test_circular_params_still_dispatched(self) -> None:
        provider = _mock_provider()
        params: dict[str, object] = {"model": "m"}
        params["self"] = params
        env = await RequestDispatcher(provider).send(Operation.CREATE_COMPLETION, params)
        assert env.status == 200
