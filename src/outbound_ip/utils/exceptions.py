"""Custom exceptions and error handling utilities."""

import logging
import socket
from typing import Any, Optional

import dns.exception
import dns.resolver
import sentry_sdk

logger = logging.getLogger(__name__)


class OutboundIPError(Exception):
    """Base exception for Outbound IP service errors."""


class DNSResolutionError(OutboundIPError):
    """The DNS lookup itself failed (NXDOMAIN, timeout, network error)."""


class InvalidAddressFamilyError(OutboundIPError):
    """The DNS lookup succeeded but did not yield an IPv4 address."""

    def __init__(self, message: str, hostname: str, raw: dict[str, Any]):
        super().__init__(message)
        self.hostname = hostname
        self.raw = raw


# Resolver failures that are part of normal operation
EXPECTED_DNS_ERRORS = (
    socket.gaierror,
    dns.resolver.NoAnswer,
    dns.resolver.NXDOMAIN,
    dns.resolver.NoNameservers,
    dns.exception.Timeout,
)


def error_message(exception: BaseException) -> str:
    """Return the exception text, falling back to its class name."""
    return str(exception) or type(exception).__name__


def capture_exception(
    exception: BaseException,
    context: Optional[dict] = None,
    level: str = "error",
) -> None:
    """
    Capture exception to Sentry if configured, otherwise log it.

    Args:
        exception: The exception to capture
        context: Additional context to include
        level: Log level ('error', 'warning', 'info')
    """
    log_func = getattr(logger, level, logger.error)
    log_func("%s: %s", type(exception).__name__, exception, exc_info=True)

    if not sentry_sdk.get_client().is_active():
        return

    if context:
        with sentry_sdk.new_scope() as scope:
            for key, value in context.items():
                scope.set_extra(key, value)
            sentry_sdk.capture_exception(exception)
    else:
        sentry_sdk.capture_exception(exception)


def is_expected_dns_error(exception: BaseException) -> bool:
    """Check if exception is an expected resolver error (NXDOMAIN, timeout, ...)."""
    return isinstance(exception, EXPECTED_DNS_ERRORS)
