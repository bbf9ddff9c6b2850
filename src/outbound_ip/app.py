"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from outbound_ip.api.middleware import log_requests
from outbound_ip.api.routes import RouteDependencies, router
from outbound_ip.core.config import Settings, get_settings
from outbound_ip.dns.resolver import HostResolver
from outbound_ip.utils.decorators import init_sentry

# Configure logging for the application
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings: Settings = app.state.dependencies.settings
    sentry_enabled = init_sentry(settings)

    logger.info(f"Server listening on port {settings.port}")
    logger.info(f"Swagger UI available at {app.docs_url}")
    logger.info(f"AWS base URL: {settings.aws_base_url}")
    logger.info(f"Resolver: {settings.resolver_backend}")
    logger.info(
        f"X-Forwarded-For: {'trusted' if settings.trusts_forwarded_for else 'ignored'} "
        f"({settings.trusted_proxy_hops} proxy hops)"
    )
    logger.info(f"Sentry: {'enabled' if sentry_enabled else 'disabled'}")

    yield

    logger.info("Outbound IP service shutting down...")


def create_app(
    settings: Optional[Settings] = None,
    resolver: Optional[HostResolver] = None,
) -> FastAPI:
    """Build the application around one immutable settings instance."""
    settings = settings or get_settings()

    logging.getLogger("outbound_ip").setLevel(settings.log_level)

    application = FastAPI(
        title="Outbound IP Service",
        description=(
            "Tiny service that resolves AWS public IP and logs the caller IP "
            "for inbound requests."
        ),
        version="1.0.0",
        servers=[{"url": "/"}],
        lifespan=lifespan,
    )
    application.state.dependencies = RouteDependencies(
        settings=settings, resolver=resolver
    )

    application.middleware("http")(log_requests)
    application.include_router(router)

    return application


app = create_app()
