"""Tests for the Vottun HTTP wrapper, using httpx.MockTransport."""

from __future__ import annotations

import httpx
import pytest

from vottun.client import VottunClient
from vottun.config import VottunSettings
from vottun.errors import VottunApiError, VottunError, VottunHttpError, VottunTransportError


class TestRequests:
    """Tests for headers, URLs and payloads."""

    def test_auth_headers(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/name", {"name": "TestToken"})
        client.get("erc/v1/erc20/name", {"network": 80002})

        headers = fake_api.last.headers
        assert headers["Authorization"] == "Bearer test-api-key"
        assert headers["x-application-vkn"] == "test-vkn"
        assert headers["Accept"] == "application/json"

    def test_get_query(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/name", {"name": "TestToken"})
        body = client.get("erc/v1/erc20/name", {"contractAddress": "0xabc", "network": 80002})

        assert body == {"name": "TestToken"}
        assert fake_api.last.method == "GET"
        assert fake_api.last.url.host == "api.vottun.tech"
        assert fake_api.last.url.path == "/erc/v1/erc20/name"
        assert fake_api.last.url.params["network"] == "80002"
        assert fake_api.last.url.params["contractAddress"] == "0xabc"

    def test_post_mapping_keeps_big_integers(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/transfer", {"txHash": "0x01"})
        client.post("erc/v1/erc20/transfer", {"amount": 100001000000000000000})

        assert fake_api.last.method == "POST"
        assert fake_api.last_json() == {"amount": 100001000000000000000}
        assert b"100001000000000000000" in fake_api.last.content

    def test_post_json_string(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/transfer", {"txHash": "0x01"})
        client.post("erc/v1/erc20/transfer", '{"amount": 5}')

        assert fake_api.last.headers["Content-Type"] == "application/json"
        assert fake_api.last_json() == {"amount": 5}

    def test_post_invalid_json_string(self, client: VottunClient, fake_api) -> None:
        with pytest.raises(VottunError, match="not valid JSON"):
            client.post("erc/v1/erc20/transfer", "{amount: ")
        assert fake_api.requests == []


class TestErrors:
    """Tests for error mapping."""

    def test_code_field_raises_api_error(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/name", {"code": "E001", "message": "Invalid contract"})

        with pytest.raises(VottunApiError) as exc_info:
            client.get("erc/v1/erc20/name")

        assert exc_info.value.code == "E001"
        assert exc_info.value.message == "Invalid contract"
        assert "[E001] Invalid contract" in str(exc_info.value)

    def test_code_field_wins_over_http_status(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/deploy", {"code": 401, "message": "Unauthorized"}, status=401)

        with pytest.raises(VottunApiError):
            client.post("erc/v1/erc20/deploy", {})

    def test_null_code_is_not_an_error(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/name", {"code": None, "name": "T"})
        assert client.get("erc/v1/erc20/name")["name"] == "T"

    def test_http_error(self, client: VottunClient, fake_api) -> None:
        with pytest.raises(VottunHttpError) as exc_info:
            client.get("erc/v1/erc20/unknown")

        assert exc_info.value.status_code == 404
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    def test_non_json_body(self, client: VottunClient, fake_api) -> None:
        fake_api.reply("erc/v1/erc20/name", "<html>oops</html>")

        with pytest.raises(VottunError, match="Unexpected response body"):
            client.get("erc/v1/erc20/name")

    def test_transport_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("DNS failure", request=request)

        with VottunClient("k", "v", transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(VottunTransportError, match="DNS failure"):
                client.get("erc/v1/erc20/name")

    def test_exit_codes(self) -> None:
        assert VottunApiError("x", "y").exit_code == 5
        assert VottunHttpError("x").exit_code == 4
        assert VottunTransportError("x").exit_code == 3


class TestFromSettings:
    """Tests for VottunClient.from_settings."""

    def test_uses_settings(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"ok": True})

        settings = VottunSettings(
            api_key="key-1",
            application_vkn="vkn-1",
            base_url="https://sandbox.example/api/",
        )
        with VottunClient.from_settings(settings, transport=httpx.MockTransport(handler)) as client:
            assert client.get("ping") == {"ok": True}

        assert str(seen[0].url) == "https://sandbox.example/api/ping"
        assert seen[0].headers["Authorization"] == "Bearer key-1"
