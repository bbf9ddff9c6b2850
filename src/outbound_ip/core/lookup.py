"""Public IPv4 lookup for the configured base URL."""

import logging
from dataclasses import dataclass
from typing import Optional

from outbound_ip.dns.resolver import HostResolver
from outbound_ip.dns.validators import is_ipv4
from outbound_ip.utils.exceptions import (
    DNSResolutionError,
    InvalidAddressFamilyError,
    capture_exception,
    error_message,
    is_expected_dns_error,
)

logger = logging.getLogger(__name__)

LOOKUP_METHOD = "dns-lookup"


@dataclass(frozen=True)
class PublicIP:
    """A successfully resolved public IPv4 address."""

    ip: str
    hostname: str
    method: str = LOOKUP_METHOD


async def resolve_public_ip(
    base_url: str,
    hostname: Optional[str],
    resolver: HostResolver,
    request_id: str = "no-request-id",
) -> PublicIP:
    """
    Resolve the IPv4 address of the base URL's hostname.

    Makes exactly one lookup attempt.

    Raises:
        DNSResolutionError: the URL has no hostname or the lookup failed.
        InvalidAddressFamilyError: the lookup returned something other than IPv4.
    """
    if not hostname:
        raise DNSResolutionError(f"Invalid URL: {base_url!r}")

    logger.info(
        f"[{request_id}] Resolving AWS hostname via DNS | hostname={hostname} "
        f"| AWS_BASE_URL={base_url}"
    )

    try:
        result = await resolver.lookup(hostname)
    except DNSResolutionError as e:
        logger.warning(
            f"[{request_id}] DNS lookup failed | hostname={hostname} | message={e}"
        )
        raise
    except Exception as e:
        if is_expected_dns_error(e):
            logger.warning(
                f"[{request_id}] DNS lookup failed | hostname={hostname} "
                f"| message={error_message(e)}"
            )
        else:
            capture_exception(e, {"hostname": hostname, "request_id": request_id})
        raise DNSResolutionError(error_message(e)) from e

    if not is_ipv4(result.address):
        logger.warning(
            f"[{request_id}] DNS lookup returned non-IPv4 | hostname={hostname} "
            f"| result={result.to_dict()}"
        )
        raise InvalidAddressFamilyError(
            "DNS lookup did not return a valid IPv4 address",
            hostname=hostname,
            raw=result.to_dict(),
        )

    logger.info(
        f"[{request_id}] Resolved AWS IP OK | hostname={hostname} | ip={result.address}"
    )

    return PublicIP(ip=result.address, hostname=hostname)
