"""DNS resolution backends."""

# pylint: disable=missing-function-docstring

import asyncio
import socket
from dataclasses import dataclass, field
from typing import Any, Protocol

import dns.asyncresolver

from outbound_ip.core.config import Settings
from outbound_ip.utils.exceptions import DNSResolutionError


@dataclass(frozen=True)
class LookupResult:
    """Raw output of a single forward lookup."""

    address: str
    family: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {"address": self.address, "family": self.family}


class HostResolver(Protocol):
    """Protocol for IPv4 forward lookups."""

    async def lookup(self, hostname: str) -> LookupResult: ...


@dataclass
class SystemResolver:
    """Resolver delegating to the operating system via getaddrinfo."""

    async def lookup(self, hostname: str) -> LookupResult:
        loop = asyncio.get_running_loop()
        infos = await loop.getaddrinfo(
            hostname, None, family=socket.AF_INET, type=socket.SOCK_STREAM
        )

        if not infos:
            raise DNSResolutionError(f"No address found for {hostname}")

        family, _, _, _, sockaddr = infos[0]

        return LookupResult(
            address=str(sockaddr[0]),
            family=6 if family == socket.AF_INET6 else 4,
        )


@dataclass
class DnspythonResolver:
    """Resolver querying the A record directly with dnspython."""

    resolver: dns.asyncresolver.Resolver = field(
        default_factory=dns.asyncresolver.Resolver
    )

    async def lookup(self, hostname: str) -> LookupResult:
        answer = await self.resolver.resolve(hostname, "A")
        rdata = next(iter(answer))

        return LookupResult(address=rdata.address, family=4)


def get_resolver(settings: Settings) -> HostResolver:
    """Build the resolver backend selected by the settings."""
    if settings.resolver_backend == "dnspython":
        return DnspythonResolver()

    return SystemResolver()
