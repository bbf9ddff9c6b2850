"""Entry point for running the application directly."""

import uvicorn

from outbound_ip.core.config import get_settings


def main():
    """Run the application."""
    settings = get_settings()

    uvicorn.run(
        "outbound_ip.app:app",
        host=settings.host,
        port=settings.port,
        log_level="warning",
    )


if __name__ == "__main__":
    main()
