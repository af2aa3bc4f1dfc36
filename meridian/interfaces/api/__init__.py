"""
API layer package for Meridian.
Exports the wire codec and the FastAPI error handlers.
"""

from meridian.interfaces.api.codec import (
    decode_collection_file,
    decode_payload,
    encode_collection_file,
    encode_payload,
)
from meridian.interfaces.api.error_handlers import register_exception_handlers

__all__ = [
    "decode_collection_file",
    "decode_payload",
    "encode_collection_file",
    "encode_payload",
    "register_exception_handlers",
]
