"""
HTTP client for the Vottun API.

Wraps an ``httpx.Client`` configured with the bearer token, the
application VKN header and a short timeout.  Every response body is a
JSON object; a ``code`` field in it marks an application error even when
the HTTP status is 2xx.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, VottunSettings
from .errors import VottunApiError, VottunError, VottunHttpError, VottunTransportError

logger = logging.getLogger(__name__)


class VottunClient:
    """
    Authenticated client for https://api.vottun.tech/.

    Usage:
        with VottunClient(api_key, application_vkn) as client:
            body = client.get("erc/v1/erc20/name", {"contractAddress": ..., "network": 80002})
    """

    def __init__(
        self,
        api_key: str,
        application_vkn: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.application_vkn = application_vkn
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={
                "Authorization": f"Bearer {api_key}",
                "x-application-vkn": application_vkn,
                "Accept": "application/json",
            },
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: VottunSettings,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> "VottunClient":
        return cls(
            settings.api_key,
            settings.application_vkn,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"VottunClient(base_url={str(self._client.base_url)!r})"

    def __enter__(self) -> "VottunClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def get(self, uri: str, query: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        """
        Send a GET request.

        Args:
            uri: Path relative to the base URL
            query: Query parameters

        Returns:
            Decoded response body
        """
        return self._request("GET", uri, params=dict(query or {}))

    def post(self, uri: str, data: Union[Mapping[str, Any], str]) -> dict[str, Any]:
        """
        Send a POST request.

        Args:
            uri: Path relative to the base URL
            data: Mapping sent as JSON, or an already serialised JSON string

        Returns:
            Decoded response body
        """
        if isinstance(data, str):
            try:
                json.loads(data)
            except json.JSONDecodeError as exc:
                raise VottunError(f"Request body is not valid JSON: {exc}") from exc
            return self._request(
                "POST",
                uri,
                content=data.encode("utf-8"),
                headers={"Content-Type": "application/json"},
            )
        return self._request("POST", uri, json=dict(data))

    def _request(self, method: str, uri: str, **kwargs: Any) -> dict[str, Any]:
        logger.debug("%s %s", method, uri)
        try:
            response = self._client.request(method, uri, **kwargs)
        except httpx.RequestError as exc:
            raise VottunTransportError(f"HTTP client error: {exc}") from exc

        logger.debug("%s %s -> %s", method, uri, response.status_code)

        try:
            body = response.json()
        except ValueError:
            body = None

        # An application error wins over the HTTP status
        if isinstance(body, dict) and body.get("code") is not None:
            logger.warning("Vottun API error on %s: [%s] %s", uri, body["code"], body.get("message"))
            raise VottunApiError(body["code"], body.get("message"))

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise VottunHttpError(
                f"HTTP request failed: {response.status_code} - {response.text[:200]}",
                status_code=response.status_code,
            ) from exc

        if not isinstance(body, dict):
            raise VottunError(f"Unexpected response body: {response.text[:200]}")

        return body
