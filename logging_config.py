"""
Logging configuration for gworkspace-reader.

Simple setup that adapters and tools can import.
Extractors should NOT log (they're pure functions).
"""

import logging
import sys

# Create logger for the package
logger = logging.getLogger("gwreader")

# Third-party loggers that chatter at INFO (discovery cache, token refresh)
NOISY_LOGGERS = ("googleapiclient", "googleapiclient.discovery_cache", "google.auth")


def configure_logging(level: str = "INFO") -> None:
    """
    Configure logging for gworkspace-reader.

    Logs go to stderr: stdout carries the MCP stdio transport.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
    """
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Only add handler if not already configured
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)

        # Concise format for MCP context
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


# NOTE: Call configure_logging() explicitly in server.py, cli.py or test setup.
# We don't auto-configure to avoid side effects on import.


def log_api_call(service: str, method: str, **params: object) -> None:
    """Log an API call with key parameters."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.debug(f"API: {service}.{method}({param_str})")


def log_api_result(service: str, method: str, result_count: int | None = None) -> None:
    """Log API result summary."""
    if result_count is not None:
        logger.debug(f"API: {service}.{method} returned {result_count} results")
    else:
        logger.debug(f"API: {service}.{method} completed")
