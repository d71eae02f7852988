"""HTTP transport: host ranking, request options and the retrying dispatcher."""

from algolia_client.transport.cache import NullCache
from algolia_client.transport.hosts import CallType, Host, HostRanker
from algolia_client.transport.request_options import RequestOptions
from algolia_client.transport.requester import Transport

__all__ = [
    "CallType",
    "Host",
    "HostRanker",
    "NullCache",
    "RequestOptions",
    "Transport",
]
