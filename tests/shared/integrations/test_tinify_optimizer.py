# -*- coding: utf-8 -*-
import base64

import httpx

from showcase.shared.integrations import TinifyImageOptimizer
from showcase.shared.results import ErrorType

API_URL = "https://api.tinify.test"
OUTPUT_URL = f"{API_URL}/output/abc123"


def _expected_auth(key: str) -> str:
    return "Basic " + base64.b64encode(f"api:{key}".encode()).decode()


def _optimizer(handler, key: str = "secret") -> TinifyImageOptimizer:
    return TinifyImageOptimizer(key, api_url=API_URL, transport=httpx.MockTransport(handler))


async def test_optimise_shrinks_then_downloads_output():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, str(request.url), request.headers.get("Authorization")))
        if request.method == "POST":
            assert request.content == b"raw-image"
            return httpx.Response(201, headers={"Location": OUTPUT_URL})
        return httpx.Response(200, content=b"small-image")

    result = await _optimizer(handler).optimise(b"raw-image")

    assert result.unwrap() == b"small-image"
    assert seen == [
        ("POST", f"{API_URL}/shrink", _expected_auth("secret")),
        ("GET", OUTPUT_URL, _expected_auth("secret")),
    ]


async def test_optimise_without_key_is_disabled():
    def handler(request):  # pragma: no cover - no debe llamarse
        raise AssertionError("no HTTP call expected")

    optimizer = _optimizer(handler, key="")

    assert optimizer.enabled is False
    result = await optimizer.optimise(b"raw")
    assert result.error_type == ErrorType.BAD_REQUEST


async def test_optimise_rejected_upload_is_failure():
    result = await _optimizer(lambda request: httpx.Response(401)).optimise(b"raw")
    assert result.error_type == ErrorType.BAD_REQUEST
    assert result.message == "The image could not be optimised."


async def test_optimise_missing_location_is_failure():
    result = await _optimizer(lambda request: httpx.Response(201)).optimise(b"raw")
    assert result.is_failure


async def test_optimise_transport_error_is_failure():
    def handler(request):
        raise httpx.ConnectError("offline", request=request)

    result = await _optimizer(handler).optimise(b"raw")
    assert result.error_type == ErrorType.BAD_REQUEST
