import logging
import json
from typing import Any, Dict, Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Optional specific logger name. If not provided, returns the package logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("pihole_admin_api")
    elif name.startswith("pihole_admin_api"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"pihole_admin_api.{name}")


def log_extra_fields(
    logger: logging.Logger,
    obj_name: str,
    extra_fields: Dict[str, Any],
    max_length: int = 300,
):
    """
    Log API fields that a model does not declare.

    Args:
        logger: Logger to use
        obj_name: Name of the record type (e.g., 'PiholeSummary').
        extra_fields: Dictionary of extra fields.
        max_length: Maximum length for field values in the log. Default is 300.
    """
    if not extra_fields:
        return

    truncated_fields = {}
    for key, value in extra_fields.items():
        if isinstance(value, (dict, list)):
            value_str = json.dumps(value)
            if len(value_str) > max_length:
                value_str = value_str[:max_length] + "... [truncated]"
            truncated_fields[key] = value_str
        elif isinstance(value, str) and len(value) > max_length:
            truncated_fields[key] = value[:max_length] + "... [truncated]"
        else:
            truncated_fields[key] = value

    logger.debug(
        f"Extra fields for {obj_name}: {json.dumps(truncated_fields, indent=2)}"
    )


def log_api_response(
    logger: logging.Logger,
    url: str,
    body: bytes,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log a raw API response body at debug level.

    Args:
        logger: Logger to use
        url: The API URL that was called.
        body: The raw response body.
        status_code: HTTP status code.
        truncate: Whether to truncate large bodies. Default is True.
        max_length: Maximum length for the body in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    response_str = body.decode("utf-8", errors="replace")
    if truncate and len(response_str) > max_length:
        response_str = response_str[:max_length] + "... [truncated]"

    logger.debug(
        f"API Response from {url} (Status: {status_code}):\n{response_str}"
    )
