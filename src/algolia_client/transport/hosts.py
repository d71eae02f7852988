"""Ranked host clusters with failure tracking.

Each API is served by several DNS names. The ranker orders them by priority,
takes a host out of rotation after a failure and brings it back once its
cooldown window has elapsed.
"""

import enum
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Callable

from algolia_client.config import Config

logger = logging.getLogger(__name__)


class CallType(enum.Enum):
    """Kind of call, used to pick the hosts that may serve it."""

    READ = "read"
    WRITE = "write"


_ALL_CALL_TYPES = frozenset({CallType.READ, CallType.WRITE})


@dataclass
class Host:
    """One DNS endpoint of a cluster and its health state."""

    hostname: str
    priority: int = 0
    accept: frozenset[CallType] = _ALL_CALL_TYPES
    up: bool = True
    retry_count: int = 0
    """Number of timeouts seen since the last reset; scales the next timeout."""
    last_use: float = field(default=0.0, compare=False)

    def accepts(self, call_type: CallType) -> bool:
        return call_type in self.accept

    def reset(self) -> None:
        self.up = True
        self.retry_count = 0

    def timeout(self, base: float) -> float:
        """Timeout for the next attempt against this host."""
        return base * (self.retry_count + 1)


class HostRanker:
    """Orders the hosts of a cluster and tracks their failures."""

    def __init__(
        self,
        hosts: list[Host],
        ttl: float = Config.HOST_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the ranker.

        Args:
            hosts: Candidate hosts, in fallback order for equal priorities.
            ttl: Seconds after which a failed host is restored.
            clock: Monotonic time source, injectable for tests.
        """
        if not hosts:
            raise ValueError("At least one host is required")
        self._hosts = hosts
        self.ttl = ttl
        self._clock = clock

    @classmethod
    def for_search(cls, app_id: str, ttl: float = Config.HOST_TTL) -> "HostRanker":
        """Default Search cluster: DSN for reads, primary for writes, then fallbacks."""
        fallbacks = [
            Host(f"{app_id}-{number}.algolianet.com", priority=0)
            for number in (1, 2, 3)
        ]
        random.shuffle(fallbacks)
        return cls(
            [
                Host(
                    f"{app_id}-dsn.algolia.net",
                    priority=10,
                    accept=frozenset({CallType.READ}),
                ),
                Host(
                    f"{app_id}.algolia.net",
                    priority=10,
                    accept=frozenset({CallType.WRITE}),
                ),
                *fallbacks,
            ],
            ttl=ttl,
        )

    @classmethod
    def from_hostnames(
        cls, hostnames: list[str], ttl: float = Config.HOST_TTL
    ) -> "HostRanker":
        """Cluster made of explicit hosts, each serving reads and writes."""
        return cls([Host(hostname) for hostname in hostnames], ttl=ttl)

    @property
    def hosts(self) -> list[Host]:
        return list(self._hosts)

    def reachable_hosts(self, call_type: CallType) -> list[Host]:
        """Return the hosts to try for a call, best first.

        Hosts whose cooldown has expired are restored first. If no host is
        left up, the whole set is reset so that a call is always attempted.
        """
        candidates = [host for host in self._hosts if host.accepts(call_type)]
        now = self._clock()

        for host in candidates:
            degraded = not host.up or host.retry_count > 0
            if degraded and now - host.last_use > self.ttl:
                logger.debug("Restoring host %s after cooldown", host.hostname)
                host.reset()

        reachable = [host for host in candidates if host.up]
        if not reachable:
            logger.info("All %s hosts are down, resetting them", call_type.value)
            for host in candidates:
                host.reset()
            reachable = candidates

        return sorted(reachable, key=lambda host: host.priority, reverse=True)

    def mark_up(self, host: Host) -> None:
        host.up = True
        host.last_use = self._clock()

    def mark_down(self, host: Host) -> None:
        host.up = False
        host.last_use = self._clock()

    def mark_timed_out(self, host: Host) -> None:
        host.up = True
        host.retry_count += 1
        host.last_use = self._clock()
