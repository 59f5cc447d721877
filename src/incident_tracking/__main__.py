"""Process entry point: ``python -m incident_tracking``."""

import sys

import uvicorn

from incident_tracking.config import settings
from incident_tracking.logging import flush_logging, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Serve the app until the host stops, logging start, stop and crashes.

    Returns the process exit status: 0 on a clean stop, 1 if the host raised.
    """
    logger.info(
        "service_starting", app_name=settings.app_name, host=settings.host, port=settings.port
    )
    try:
        uvicorn.run(
            "incident_tracking.main:app",
            host=settings.host,
            port=settings.port,
            log_config=None,  # keep the structlog handlers configured on import
        )
    except Exception:
        logger.exception("host_terminated_unexpectedly")
        return 1
    finally:
        logger.info("service_stopped")
        flush_logging()
    return 0


if __name__ == "__main__":
    sys.exit(main())
