"""Tests for HTTP error mapping in FetchClient."""
import asyncio

import httpx
import pytest
from doctoscrape.errors import HttpStatusError, NetworkError
from doctoscrape.fetch.client import FetchClient


def fetch_with(handler, url="https://www.doctolib.fr/test"):
    async def go():
        async with FetchClient(transport=httpx.MockTransport(handler)) as client:
            return await client.fetch_text(url)

    return asyncio.run(go())


def test_fetch_text():
    assert fetch_with(lambda request: httpx.Response(200, text="<html>ok</html>")) == "<html>ok</html>"


def test_fetch_sends_user_agent():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers["User-Agent"]
        return httpx.Response(200, text="")

    fetch_with(handler)
    assert seen["ua"].startswith("doctoscrape/")


def test_non_success_status_raises():
    with pytest.raises(HttpStatusError) as exc_info:
        fetch_with(lambda request: httpx.Response(403, text="Forbidden"))
    assert exc_info.value.status_code == 403
    assert exc_info.value.url == "https://www.doctolib.fr/test"


def test_transport_error_raises_network_error():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    with pytest.raises(NetworkError):
        fetch_with(handler)


def test_timeout_raises_network_error():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(NetworkError):
        fetch_with(handler)


def test_redirect_loop_raises_network_error():
    """Redirect loops are request errors too, not escaping httpx exceptions."""
    def handler(request):
        return httpx.Response(302, headers={"Location": str(request.url)})

    with pytest.raises(NetworkError):
        fetch_with(handler)
