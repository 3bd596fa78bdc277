"""
Tests for the asynchronous client pipeline over httpx.
"""

import httpx
import pytest
from pytest_httpx import HTTPXMock

from restify import Authorizer, Endpoint, Fail, HttpxTransport, Ok, RestClient
from restify.constants import HEADER_APP_ID, HEADER_REQ_SIG


class TestClientAsync:
    @pytest.mark.anyio
    async def test_get_async(self, httpx_mock: HTTPXMock, client: RestClient):
        httpx_mock.add_response(
            url="https://api.example.com/v1/users/42",
            status_code=200,
            json={"id": 42},
        )

        result = await client.get_async(Endpoint().with_version("v1").with_path("users/{id}", {"id": "42"}))

        assert result == Ok({"id": 42})
        sent_request = httpx_mock.get_request()
        assert sent_request.method == "GET"

    @pytest.mark.anyio
    async def test_post_async_signed(self, httpx_mock: HTTPXMock, client: RestClient):
        httpx_mock.add_response(url="https://api.example.com/orders", status_code=201, json={"ok": True})
        client.use_authorizer(Authorizer("app-id", "app-key"))
        client.set_authentication_header("tok")

        result = await client.post_async(Endpoint().with_path("orders"), {"qty": 1})

        assert result.is_ok
        sent_request = httpx_mock.get_request()
        assert sent_request.method == "POST"
        assert sent_request.content == b'{"qty":1}'
        assert sent_request.headers["Content-Type"] == "application/json; charset=utf-8"
        assert sent_request.headers["Authorization"] == "Bearer tok"
        assert sent_request.headers[HEADER_APP_ID] == "app-id"
        assert len(sent_request.headers[HEADER_REQ_SIG]) == 64

    @pytest.mark.anyio
    async def test_put_patch_delete_async(self, httpx_mock: HTTPXMock, client: RestClient):
        for _ in range(3):
            httpx_mock.add_response(url="https://api.example.com/items/1", text="done")

        endpoint = Endpoint().with_path("items/1")
        put = await client.put_async(endpoint, {"a": 1}, result_type=str)
        patch = await client.patch_async(endpoint, {"a": 2}, result_type=str)
        delete = await client.delete_async(endpoint, result_type=str)

        assert put == patch == delete == Ok("done")
        methods = [request.method for request in httpx_mock.get_requests()]
        assert methods == ["PUT", "PATCH", "DELETE"]

    @pytest.mark.anyio
    async def test_duplicate_headers_kept(self, httpx_mock: HTTPXMock, client: RestClient):
        httpx_mock.add_response(url="https://api.example.com/a", text="")
        client.default_headers = {"X-Trace": "default"}

        await client.get_async(Endpoint().with_path("a"), headers={"X-Trace": "call"}, result_type=str)

        sent_request = httpx_mock.get_request()
        assert sent_request.headers.get_list("X-Trace") == ["default", "call"]

    @pytest.mark.anyio
    async def test_http_failure_async(self, httpx_mock: HTTPXMock, client: RestClient):
        httpx_mock.add_response(url="https://api.example.com/missing", status_code=404, text="not found")

        result = await client.get_async(Endpoint().with_path("missing"))

        assert isinstance(result, Fail)
        assert result.raw_body == "not found"
        assert "404" in result.reasons[0]

    @pytest.mark.anyio
    async def test_transport_fault_propagates_async(self, httpx_mock: HTTPXMock, client: RestClient):
        httpx_mock.add_exception(httpx.ConnectError("unreachable"))

        with pytest.raises(httpx.ConnectError):
            await client.get_async(Endpoint().with_path("a"))

    @pytest.mark.anyio
    async def test_custom_transport_kwargs(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=str(request.url))

        client = RestClient(
            "https://api.example.com",
            async_transport=HttpxTransport(transport=httpx.MockTransport(handler)),
        )

        result = await client.get_async(Endpoint().with_path("echo").with_query({"q": "1"}), result_type=str)

        assert result == Ok("https://api.example.com/echo?q=1")
