"""Caller IP extraction from request metadata."""

from typing import Mapping, Optional

from fastapi import Request

FORWARDED_FOR_HEADER = "x-forwarded-for"
USER_AGENT_HEADER = "user-agent"

MAX_LOGGED_USER_AGENT = 120


def get_forwarded_for(headers: Mapping[str, str]) -> Optional[str]:
    """
    Return the raw X-Forwarded-For chain, or None when absent or empty.

    Repeated header lines are joined with ", ".
    """
    getlist = getattr(headers, "getlist", None)
    if getlist is not None:
        return ", ".join(v for v in getlist(FORWARDED_FOR_HEADER) if v) or None

    return headers.get(FORWARDED_FOR_HEADER) or None


def get_user_agent(headers: Mapping[str, str]) -> Optional[str]:
    """Return the User-Agent header, or None when absent or empty."""
    return headers.get(USER_AGENT_HEADER) or None


def get_client_ip(
    headers: Mapping[str, str],
    peer: Optional[str],
    trusted_proxy_hops: int = 1,
) -> str:
    """
    Best-effort caller IP.

    When at least one proxy hop is trusted, the first entry of
    X-Forwarded-For wins. Otherwise, or when the header is missing, the
    transport peer address is used. The result is not validated.

    Args:
        headers: Request headers with lowercase keys (or case-insensitive)
        peer: Transport-level peer address, if known
        trusted_proxy_hops: Number of reverse proxies in front of the service

    Returns:
        The caller IP, or an empty string if nothing is known.
    """
    if trusted_proxy_hops > 0:
        forwarded_for = get_forwarded_for(headers)
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()

    return peer or ""


def short_user_agent(user_agent: Optional[str]) -> str:
    """Truncate a User-Agent for log lines."""
    if not user_agent:
        return ""

    return str(user_agent)[:MAX_LOGGED_USER_AGENT]


def request_client_ip(request: Request, trusted_proxy_hops: int = 1) -> str:
    """Best-effort caller IP for a request."""
    peer = request.client.host if request.client else None
    return get_client_ip(request.headers, peer, trusted_proxy_hops)
