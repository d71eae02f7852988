"""Per-call options: extra headers, query parameters, body fields and timeouts."""

from dataclasses import dataclass, field
from typing import Any, Union

from algolia_client.transport.hosts import CallType

_HEADER_NAMES = {"content-type", "user-agent", "authorization"}

# Options the API reads from the query string rather than the body.
_QUERY_PARAMETER_NAMES = {
    "forwardToReplicas",
    "replaceExistingSynonyms",
    "clearExistingRules",
    "getVersion",
    "createIfNotExists",
}


@dataclass
class RequestOptions:
    """Options merged into one request on top of the client defaults."""

    headers: dict[str, str] = field(default_factory=dict)
    query_parameters: dict[str, Any] = field(default_factory=dict)
    body: dict[str, Any] = field(default_factory=dict)
    read_timeout: float | None = None
    write_timeout: float | None = None

    @classmethod
    def create(
        cls,
        options: Union["RequestOptions", dict[str, Any], None] = None,
        defaults: dict[str, Any] | None = None,
    ) -> "RequestOptions":
        """Normalize caller options and merge defaults under them.

        Args:
            options: A RequestOptions, a flat dict of mixed options, or None.
                Dict keys are routed to headers, query parameters, timeouts
                or body fields by name.
            defaults: Flat dict of options applied only where the caller did
                not set the same key.
        """
        if isinstance(options, RequestOptions):
            request_options = cls(
                headers=dict(options.headers),
                query_parameters=dict(options.query_parameters),
                body=dict(options.body),
                read_timeout=options.read_timeout,
                write_timeout=options.write_timeout,
            )
        else:
            request_options = cls()
            for key, value in (options or {}).items():
                request_options.add(key, value)

        for key, value in (defaults or {}).items():
            if key not in request_options:
                request_options.add(key, value)

        return request_options

    def add(self, key: str, value: Any) -> None:
        """Route one flat option to the right part of the request."""
        lowered = key.lower()
        if lowered.startswith("x-") or lowered in _HEADER_NAMES:
            self.headers[key] = str(value)
        elif key in _QUERY_PARAMETER_NAMES:
            self.query_parameters[key] = value
        elif key in ("readTimeout", "read_timeout"):
            self.read_timeout = float(value)
        elif key in ("writeTimeout", "write_timeout"):
            self.write_timeout = float(value)
        else:
            self.body[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.headers or key in self.query_parameters or key in self.body

    def timeout_for(self, call_type: CallType) -> float | None:
        if call_type is CallType.READ:
            return self.read_timeout
        return self.write_timeout
