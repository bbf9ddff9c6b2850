"""API routes for the Outbound IP service."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from outbound_ip.api.models import (
    ClientIPResponse,
    InvalidAddressResponse,
    PublicIPResponse,
    ResolutionErrorResponse,
)
from outbound_ip.core.client_ip import (
    get_forwarded_for,
    get_user_agent,
    request_client_ip,
)
from outbound_ip.core.config import Settings, get_settings
from outbound_ip.core.lookup import resolve_public_ip
from outbound_ip.dns.resolver import HostResolver, get_resolver
from outbound_ip.utils.decorators import sentry_exception_catcher
from outbound_ip.utils.exceptions import (
    DNSResolutionError,
    InvalidAddressFamilyError,
)

logger = logging.getLogger(__name__)

router = APIRouter()

NO_REQUEST_ID = "no-request-id"
RESOLUTION_FAILED = "Failed to determine AWS public IP"


@dataclass
class RouteDependencies:
    """Dependencies for route handlers."""

    settings: Settings = field(default_factory=get_settings)
    resolver: Optional[HostResolver] = None

    def __post_init__(self):
        if self.resolver is None:
            self.resolver = get_resolver(self.settings)


def get_dependencies(request: Request) -> RouteDependencies:
    """Get the dependencies the application was built with."""
    return request.app.state.dependencies


def get_request_id(request: Request) -> str:
    """Return the id assigned by the request logging middleware."""
    return getattr(request.state, "request_id", NO_REQUEST_ID)


@router.get(
    "/aws-public-ip",
    response_model=PublicIPResponse,
    responses={
        500: {"model": ResolutionErrorResponse, "description": RESOLUTION_FAILED},
        502: {
            "model": InvalidAddressResponse,
            "description": "DNS lookup returned a non-IPv4 address",
        },
    },
    summary="Resolve the public IPv4 for the configured AWS base URL",
    description=(
        "Resolves the hostname via DNS lookup and returns the A record IPv4 address."
    ),
)
@sentry_exception_catcher
async def aws_public_ip(
    request: Request,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Resolve the configured hostname to its public IPv4 address."""
    settings = deps.settings
    request_id = get_request_id(request)

    try:
        result = await resolve_public_ip(
            settings.aws_base_url,
            settings.aws_hostname,
            deps.resolver,
            request_id=request_id,
        )
    except InvalidAddressFamilyError as e:
        body = InvalidAddressResponse(error=str(e), hostname=e.hostname, raw=e.raw)
        return JSONResponse(status_code=502, content=body.model_dump(by_alias=True))
    except DNSResolutionError as e:
        logger.info(f"[{request_id}] Error resolving AWS IP | message={e}")
        body = ResolutionErrorResponse(error=RESOLUTION_FAILED, message=str(e))
        return JSONResponse(status_code=500, content=body.model_dump(by_alias=True))

    return PublicIPResponse(method=result.method, ip=result.ip, hostname=result.hostname)


@router.get(
    "/client-ip",
    response_model=ClientIPResponse,
    summary="Get the IP address of the caller (another service hitting this app)",
    description=(
        "Returns the best-effort caller IP using X-Forwarded-For (if present and "
        "a proxy hop is trusted) and the connection peer address."
    ),
)
@sentry_exception_catcher
async def client_ip(
    request: Request,
    deps: RouteDependencies = Depends(get_dependencies),
):
    """Report the caller's apparent IP."""
    request_id = get_request_id(request)
    ip = request_client_ip(request, deps.settings.trusted_proxy_hops)
    forwarded_for = get_forwarded_for(request.headers)

    logger.info(
        f"[{request_id}] /client-ip called | callerIp={ip} "
        f"| x-forwarded-for={forwarded_for or ''}"
    )

    return ClientIPResponse(
        caller_ip=ip,
        forwarded_for=forwarded_for,
        user_agent=get_user_agent(request.headers),
        request_id=request_id,
    )
