"""Centralized logging setup for the inventory API.

Configures the root logger to write to the console only; the container
runtime captures stdout/stderr. Uvicorn loggers propagate to the root.
"""
import logging
import time

ACCESS_LOGGER = "kube_inventory.access"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger with a single console handler.

    Args:
        level: log level name (e.g. ``INFO``, ``DEBUG``)
    """
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root_logger.addHandler(console)


def uvicorn_log_config() -> dict:
    """Uvicorn ``log_config`` that defers to the root handler set up above."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "loggers": {
            "uvicorn": {"level": "INFO"},
            "uvicorn.error": {"level": "INFO"},
            "uvicorn.access": {"level": "WARNING"},
        },
    }


def install_access_log(app) -> None:
    """Log one line per request: ``METHOD path status bytes - ms``."""
    access_logger = logging.getLogger(ACCESS_LOGGER)

    @app.middleware("http")
    async def _access_log(request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        length = response.headers.get("content-length", "-")
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        access_logger.info(
            f"{request.method} {target} {response.status_code} {length} - {elapsed_ms:.3f} ms"
        )
        return response
