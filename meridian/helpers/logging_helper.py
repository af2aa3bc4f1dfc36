"""
Logging helpers for errors that reach an API client.

Decode failures are reported to clients field by field (see
interfaces/api/codec.py). Every other failure goes through here: the details
stay in the server log, the client gets a fixed message.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def sanitize_exception_message(e: Exception, safe_message: str = "An error occurred") -> str:
    """
    Log an unexpected exception and return a client-safe message.

    Used by the 500 handler in interfaces/api/error_handlers.py. Exception text
    can carry mount source paths, DDNS or user passwords, or session tokens, so
    it is written to the log with its traceback and never returned.

    Args:
        e: The exception raised while handling a request
        safe_message: Message returned to the client instead of str(e)

    Returns:
        safe_message, unchanged
    """
    logger.error(f"[security] Exception sanitized: {e}", exc_info=e)
    return safe_message
