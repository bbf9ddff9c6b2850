"""Tests for dns/resolver.py."""

# pylint: disable=missing-function-docstring

import asyncio
import socket
from dataclasses import dataclass, field

import dns.resolver
import pytest

from outbound_ip.core.config import Settings
from outbound_ip.dns.resolver import (
    DnspythonResolver,
    LookupResult,
    SystemResolver,
    get_resolver,
)
from outbound_ip.utils.exceptions import DNSResolutionError


@dataclass
class FakeARecord:
    """Minimal stand-in for a dnspython A rdata."""

    address: str


@dataclass
class FakeAsyncResolver:
    """Fake dnspython async resolver."""

    answers: dict[str, list[str]] = field(default_factory=dict)
    queries: list[tuple[str, str]] = field(default_factory=list)

    async def resolve(self, qname: str, rdtype: str):
        self.queries.append((qname, rdtype))
        if qname not in self.answers:
            raise dns.resolver.NXDOMAIN()
        return [FakeARecord(address) for address in self.answers[qname]]


class TestLookupResult:
    """Tests for LookupResult."""

    def test_to_dict(self):
        result = LookupResult(address="203.0.113.7", family=4)
        assert result.to_dict() == {"address": "203.0.113.7", "family": 4}


class TestSystemResolver:
    """Tests for SystemResolver."""

    async def test_resolves_numeric_address(self):
        result = await SystemResolver().lookup("127.0.0.1")
        assert result == LookupResult(address="127.0.0.1", family=4)

    async def test_requests_ipv4_only(self, monkeypatch):
        calls = []

        async def fake_getaddrinfo(host, port, *, family=0, type=0, proto=0, flags=0):
            calls.append((host, family))
            return [(socket.AF_INET, socket.SOCK_STREAM, 6, "", ("198.51.100.1", 0))]

        loop = asyncio.get_running_loop()
        monkeypatch.setattr(loop, "getaddrinfo", fake_getaddrinfo)

        result = await SystemResolver().lookup("example.com")
        assert result.address == "198.51.100.1"
        assert result.family == 4
        assert calls == [("example.com", socket.AF_INET)]

    async def test_takes_first_entry(self, monkeypatch):
        async def fake_getaddrinfo(host, port, **kwargs):
            return [
                (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("198.51.100.1", 0)),
                (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("198.51.100.2", 0)),
            ]

        monkeypatch.setattr(asyncio.get_running_loop(), "getaddrinfo", fake_getaddrinfo)

        result = await SystemResolver().lookup("example.com")
        assert result.address == "198.51.100.1"

    async def test_reports_ipv6_family(self, monkeypatch):
        async def fake_getaddrinfo(host, port, **kwargs):
            return [(socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("2001:db8::1", 0, 0, 0))]

        monkeypatch.setattr(asyncio.get_running_loop(), "getaddrinfo", fake_getaddrinfo)

        result = await SystemResolver().lookup("example.com")
        assert result == LookupResult(address="2001:db8::1", family=6)

    async def test_empty_result_raises(self, monkeypatch):
        async def fake_getaddrinfo(host, port, **kwargs):
            return []

        monkeypatch.setattr(asyncio.get_running_loop(), "getaddrinfo", fake_getaddrinfo)

        with pytest.raises(DNSResolutionError):
            await SystemResolver().lookup("example.com")

    async def test_resolver_error_propagates(self, monkeypatch):
        async def fake_getaddrinfo(host, port, **kwargs):
            raise socket.gaierror(socket.EAI_NONAME, "Name or service not known")

        monkeypatch.setattr(asyncio.get_running_loop(), "getaddrinfo", fake_getaddrinfo)

        with pytest.raises(socket.gaierror):
            await SystemResolver().lookup("missing.invalid")


class TestDnspythonResolver:
    """Tests for DnspythonResolver."""

    async def test_queries_a_record(self):
        fake = FakeAsyncResolver(answers={"example.com": ["93.184.216.34", "1.2.3.4"]})

        result = await DnspythonResolver(resolver=fake).lookup("example.com")
        assert result == LookupResult(address="93.184.216.34", family=4)
        assert fake.queries == [("example.com", "A")]

    async def test_nxdomain_propagates(self):
        with pytest.raises(dns.resolver.NXDOMAIN):
            await DnspythonResolver(resolver=FakeAsyncResolver()).lookup("missing.invalid")


class TestGetResolver:
    """Tests for resolver backend selection."""

    def test_system_backend(self):
        settings = Settings(resolver_backend="system", _env_file=None)
        assert isinstance(get_resolver(settings), SystemResolver)

    def test_dnspython_backend(self):
        settings = Settings(resolver_backend="dnspython", _env_file=None)
        assert isinstance(get_resolver(settings), DnspythonResolver)
