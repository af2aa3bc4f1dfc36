"""
Wire codec for API contract types.

Decoding is the only place a request payload can be rejected: conversions
between contract types and DTOs are total. Every pydantic ValidationError is
re-raised as PayloadDecodeError so callers can report a client-input error.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from meridian.helpers.exceptions import PayloadDecodeError
from meridian.interfaces.api.types.collection_types import (
    COLLECTION_FILE_ADAPTER,
    CollectionDirectory,
    CollectionSong,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = dict[str, Any] | str | bytes


def _decode_error(model_name: str, exc: ValidationError) -> PayloadDecodeError:
    errors = [dict(e) for e in exc.errors(include_url=False, include_context=False, include_input=False)]
    logger.debug("Rejected %s payload: %d error(s)", model_name, len(errors))
    return PayloadDecodeError(model_name, errors)


def decode_payload(model: type[ModelT], payload: Payload) -> ModelT:
    """
    Decode a wire payload into a contract type.

    Args:
        model: Contract type to decode into
        payload: Parsed JSON object, or raw JSON text/bytes

    Returns:
        Validated contract instance

    Raises:
        PayloadDecodeError: Missing field, wrong type, or unknown enum tag
    """
    try:
        if isinstance(payload, str | bytes):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as e:
        raise _decode_error(model.__name__, e) from e


def encode_payload(value: BaseModel) -> dict[str, Any]:
    """Encode a contract instance into a JSON-compatible dict."""
    return value.model_dump(mode="json", by_alias=True)


def decode_collection_file(payload: Payload) -> CollectionSong | CollectionDirectory:
    """
    Decode a tagged CollectionFile payload.

    Raises:
        PayloadDecodeError: Unknown tag, both tags, no tag, or bad variant payload
    """
    try:
        if isinstance(payload, str | bytes):
            return COLLECTION_FILE_ADAPTER.validate_json(payload)
        return COLLECTION_FILE_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise _decode_error("CollectionFile", e) from e


def encode_collection_file(entry: CollectionSong | CollectionDirectory) -> dict[str, Any]:
    """Encode a CollectionFile as {"Song": {...}} or {"Directory": {...}}."""
    return COLLECTION_FILE_ADAPTER.dump_python(entry, mode="json", by_alias=True)
