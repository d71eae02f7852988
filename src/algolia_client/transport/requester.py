"""Request dispatcher with retries and host failover.

A call is sent to the best ranked host for its call type. Timeouts and
network errors or unexpected statuses move on to the next host; 4xx answers
are final and raised to the caller.
"""

import json
import logging
import time
from typing import Any, Callable

import httpx

from algolia_client.config import ClientConfig
from algolia_client.exceptions import AlgoliaApiError, UnreachableHostsError
from algolia_client.transport.cache import NullCache
from algolia_client.transport.hosts import CallType, Host, HostRanker
from algolia_client.transport.request_options import RequestOptions

logger = logging.getLogger(__name__)

_METHODS_WITHOUT_BODY = {"GET", "DELETE"}


def is_success(status_code: int) -> bool:
    return status_code // 100 == 2


def is_retryable(status_code: int) -> bool:
    """Everything that is neither a success nor a client error is retried."""
    return status_code // 100 not in (2, 4)


class Transport:
    """Sends API calls across a ranked cluster of hosts."""

    def __init__(
        self,
        config: ClientConfig,
        hosts: HostRanker,
        http_client: httpx.AsyncClient | None = None,
        cache: NullCache | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the transport.

        Args:
            config: Client configuration (credentials, timeouts, headers).
            hosts: The host ranker for this API.
            http_client: Shared httpx client. Created lazily when None and
                closed by `close()` only in that case.
            cache: Response cache consulted for read calls.
            clock: Monotonic time source used for the total timeout.
        """
        self.config = config
        self.hosts = hosts
        self.cache = cache or NullCache()
        self._http_client = http_client
        self._owns_http_client = http_client is None
        self._clock = clock

    def _client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = httpx.AsyncClient()
        return self._http_client

    async def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def read(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | dict[str, Any] | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request(
            method, path, CallType.READ, params, body, options, defaults
        )

    async def write(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: dict[str, Any] | None = None,
        options: RequestOptions | dict[str, Any] | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request(
            method, path, CallType.WRITE, params, body, options, defaults
        )

    async def request(
        self,
        method: str,
        path: str,
        call_type: CallType,
        params: dict[str, Any] | None = None,
        body: Any = None,
        options: RequestOptions | dict[str, Any] | None = None,
        defaults: dict[str, Any] | None = None,
    ) -> Any:
        """Send one logical call, failing over between hosts.

        Args:
            method: HTTP method.
            path: Path starting with the API version, e.g. "/1/indexes".
            call_type: READ or WRITE; selects hosts and the default timeout.
            params: Query string parameters.
            body: JSON body. A dict is merged with the option body fields;
                a list is sent as is.
            options: Per-call options.
            defaults: Options applied where the caller did not set them.

        Returns:
            The decoded JSON response.

        Raises:
            AlgoliaApiError: If a host answered with a 4xx status.
            UnreachableHostsError: If every host failed or the total
                timeout elapsed.
        """
        method = method.upper()
        request_options = RequestOptions.create(options, defaults)
        headers = {**self.config.headers(), **request_options.headers}
        query = {**(params or {}), **request_options.query_parameters}
        payload = self._build_payload(method, body, request_options)
        base_timeout = request_options.timeout_for(call_type) or (
            self.config.read_timeout
            if call_type is CallType.READ
            else self.config.write_timeout
        )

        cache_key = None
        if call_type is CallType.READ:
            cache_key = _cache_key(method, path, query, payload)
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        deadline = None
        if self.config.total_timeout is not None:
            deadline = self._clock() + self.config.total_timeout

        attempted: list[str] = []
        for host in self.hosts.reachable_hosts(call_type):
            if deadline is not None and self._clock() >= deadline:
                logger.warning("Total timeout elapsed after %s", attempted)
                break

            attempted.append(host.hostname)
            response = await self._send(
                host, method, path, query, payload, headers, base_timeout
            )
            if response is None:
                continue

            if is_success(response.status_code):
                try:
                    data = _decode(response)
                except ValueError as e:
                    logger.warning(
                        "Host %s answered an undecodable body, trying next host: %s",
                        host.hostname,
                        e,
                    )
                    self.hosts.mark_down(host)
                    continue
                self.hosts.mark_up(host)
                if cache_key is not None:
                    self.cache.set(cache_key, data)
                return data

            if is_retryable(response.status_code):
                logger.warning(
                    "Host %s answered %s, trying next host",
                    host.hostname,
                    response.status_code,
                )
                self.hosts.mark_down(host)
                continue

            raise _api_error(response)

        raise UnreachableHostsError(attempted)

    async def _send(
        self,
        host: Host,
        method: str,
        path: str,
        query: dict[str, Any],
        payload: Any,
        headers: dict[str, str],
        base_timeout: float,
    ) -> httpx.Response | None:
        """Send to one host. Returns None when the host must be skipped."""
        url = f"https://{host.hostname}{path}"
        timeout = httpx.Timeout(
            host.timeout(base_timeout),
            connect=host.timeout(self.config.connect_timeout),
        )
        logger.debug("%s %s", method, url)
        try:
            return await self._client().request(
                method,
                url,
                params=query or None,
                json=payload,
                headers=headers,
                timeout=timeout,
            )
        except httpx.TimeoutException as e:
            logger.warning("Timeout on host %s: %s", host.hostname, e)
            self.hosts.mark_timed_out(host)
        except httpx.TransportError as e:
            logger.warning("Network error on host %s: %s", host.hostname, e)
            self.hosts.mark_down(host)
        return None

    @staticmethod
    def _build_payload(
        method: str, body: Any, request_options: RequestOptions
    ) -> Any:
        if method in _METHODS_WITHOUT_BODY:
            return None
        if body is None:
            return dict(request_options.body) if request_options.body else None
        if isinstance(body, dict):
            return {**request_options.body, **body}
        return body


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    return response.json()


def _api_error(response: httpx.Response) -> AlgoliaApiError:
    try:
        data = response.json()
    except ValueError:
        data = None
    message = data.get("message") if isinstance(data, dict) else response.text
    return AlgoliaApiError(message or response.reason_phrase, response.status_code)


def _cache_key(method: str, path: str, query: dict[str, Any], payload: Any) -> str:
    return json.dumps([method, path, query, payload], sort_keys=True, default=str)
