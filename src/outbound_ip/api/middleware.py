"""Request correlation and access logging."""

import logging
import time
import uuid

from fastapi import Request

from outbound_ip.core.client_ip import (
    get_user_agent,
    request_client_ip,
    short_user_agent,
)

logger = logging.getLogger(__name__)


async def log_requests(request: Request, call_next):
    """Assign a request id and log entry and completion of every request."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    settings = request.app.state.dependencies.settings
    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"

    logger.info(
        f"[{request_id}] --> {request.method} {path} "
        f"| callerIp={request_client_ip(request, settings.trusted_proxy_hops)} "
        f"| ua={short_user_agent(get_user_agent(request.headers))}"
    )

    started_at = time.perf_counter()
    status_code = 500

    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        elapsed_ms = int((time.perf_counter() - started_at) * 1000)
        logger.info(
            f"[{request_id}] <-- {request.method} {path} | {status_code} | {elapsed_ms}ms"
        )
