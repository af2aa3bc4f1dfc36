"""
Helpers package.
"""

from .exceptions import ConfigFileError, PayloadDecodeError
from .logging_helper import sanitize_exception_message

__all__ = [
    "ConfigFileError",
    "PayloadDecodeError",
    "sanitize_exception_message",
]
