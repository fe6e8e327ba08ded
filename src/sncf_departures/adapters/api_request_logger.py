"""Logging of outbound API traffic when SNCF_LOG_REQUESTS is enabled."""

import json
import logging
import os

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via the SNCF_LOG_REQUESTS environment variable."""
    return os.getenv("SNCF_LOG_REQUESTS", "").lower() == "true"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of the headers with credentials masked."""
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def log_api_request(method: str, url: str, headers: dict[str, str] | None = None) -> None:
    """Log an outbound request if SNCF_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Full request URL, query string included.
        headers: Request headers; credentials are never written to the log.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {url}"]
    if headers:
        lines.append(f"Headers: {json.dumps(redact_headers(headers), indent=2)}")

    logger.info("API Request:\n" + "\n".join(lines))


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status of a response if SNCF_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} from {url} in {elapsed_seconds:.3f}s")
