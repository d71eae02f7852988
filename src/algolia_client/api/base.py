"""Shared plumbing of the API clients."""

from typing import Any

from algolia_client.config import ClientConfig
from algolia_client.transport.request_options import RequestOptions
from algolia_client.transport.requester import Transport

Options = RequestOptions | dict[str, Any] | None


def require(value: Any, name: str, operation: str) -> None:
    """Raise ValueError when a required parameter is missing or empty."""
    if value is None or (isinstance(value, (str, list, dict)) and not value):
        raise ValueError(
            f"Missing the required parameter '{name}' when calling {operation}"
        )


class BaseApiClient:
    """Async client bound to one API and its host cluster.

    Clients own their transport and should be closed when done, either with
    `await client.close()` or by using them as async context managers.
    """

    def __init__(self, transport: Transport, config: ClientConfig):
        """Initialize the client.

        Args:
            transport: Transport bound to the API's hosts.
            config: The configuration the transport was built from.
        """
        self._transport = transport
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def custom_get(
        self, path: str, parameters: dict[str, Any] | None = None
    ) -> Any:
        """Send a GET to any `/1` endpoint of this API.

        Args:
            path: Anything after `/1`, e.g. "/indexes".
            parameters: Query string parameters.
        """
        require(path, "path", "custom_get")
        return await self._transport.read("GET", f"/1{path}", params=parameters)

    async def custom_delete(
        self, path: str, parameters: dict[str, Any] | None = None
    ) -> Any:
        require(path, "path", "custom_delete")
        return await self._transport.write("DELETE", f"/1{path}", params=parameters)

    async def custom_post(
        self,
        path: str,
        parameters: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        require(path, "path", "custom_post")
        return await self._transport.write(
            "POST", f"/1{path}", body=body if body is not None else {}, params=parameters
        )

    async def custom_put(
        self,
        path: str,
        parameters: dict[str, Any] | None = None,
        body: Any = None,
    ) -> Any:
        require(path, "path", "custom_put")
        return await self._transport.write(
            "PUT", f"/1{path}", body=body if body is not None else {}, params=parameters
        )
