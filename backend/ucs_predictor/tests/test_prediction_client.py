"""Tests for the prediction client against a mocked backend."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from ucs_predictor.services.prediction_client import (
    UNREACHABLE_MESSAGE,
    PredictionClient,
    PredictionError,
)

URL = "http://model.test/predict"
PAYLOAD = {"Clay_Content": 30.0, "LL": 40.0, "PL": 20.0, "PI": 20.0}


def _predict(handler, payload: dict = PAYLOAD) -> float:
    async def go() -> float:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
            client = PredictionClient(http_client, url=URL, timeout=5.0)
            return await client.predict(payload)

    return asyncio.run(go())


def test_returns_ucs_and_posts_payload_as_json() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"ucs": 3.42})

    assert _predict(handler) == 3.42
    assert seen == {"method": "POST", "url": URL, "body": PAYLOAD}


def test_numeric_string_ucs_is_accepted() -> None:
    assert _predict(lambda request: httpx.Response(200, json={"ucs": "1.5"})) == 1.5


def test_backend_error_field_is_raised() -> None:
    handler = lambda request: httpx.Response(400, json={"error": "Missing feature CaO"})
    with pytest.raises(PredictionError, match="Error: Missing feature CaO"):
        _predict(handler)


@pytest.mark.parametrize(
    "body",
    [{"ucs": "high"}, {"ucs": True}, {"ucs": "inf"}, {"ucs": "NaN"}, {"result": 1.0}, [1, 2]],
)
def test_unusable_response_is_raised(body) -> None:
    with pytest.raises(PredictionError):
        _predict(lambda request: httpx.Response(200, json=body))


def test_non_json_response_is_raised() -> None:
    with pytest.raises(PredictionError, match="non-JSON"):
        _predict(lambda request: httpx.Response(502, text="<html>Bad gateway</html>"))


def test_unreachable_backend_is_raised() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(PredictionError, match=UNREACHABLE_MESSAGE):
        _predict(handler)


def test_single_attempt_per_call() -> None:
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(PredictionError):
        _predict(handler)
    assert len(calls) == 1


@pytest.mark.parametrize("raw", [b'{"ucs": NaN}', b'{"ucs": Infinity}', b'{"ucs": -Infinity}'])
def test_non_finite_ucs_is_raised(raw: bytes) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=raw, headers={"content-type": "application/json"})

    with pytest.raises(PredictionError, match="non-finite"):
        _predict(handler)


def test_explicit_zero_timeout_is_kept() -> None:
    async def go() -> float:
        async with httpx.AsyncClient() as http_client:
            return PredictionClient(http_client, url=URL, timeout=0).timeout

    assert asyncio.run(go()) == 0
