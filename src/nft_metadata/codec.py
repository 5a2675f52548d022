"""Conversion between Metadata and its JSON wire format."""

import json
from json import JSONDecodeError
from typing import Any, Dict, Mapping, Sequence, Union

from loguru import logger
from pydantic import ValidationError

from nft_metadata.constants import (
    COLOR_FORMAT_ERROR,
    NUMBER_ATTRIBUTE_TAG,
    STRING_ATTRIBUTE_TAG,
    UNRECOGNIZED_ATTRIBUTE_SHAPE,
)
from nft_metadata.exceptions import (
    ColorFormatError,
    DecodeError,
    StructuralError,
    UnknownEnumTokenError,
    UnrecognizedAttributeShapeError,
)
from nft_metadata.models import AttributeEntry, DisplayType, Metadata, attribute_adapter
from nft_metadata.utils import json_type

_EXPECTED_BY_ERROR_TYPE = {
    "missing": "required field",
    "string_type": "string",
    "int_type": "unsigned 64-bit integer",
    "int_parsing": "unsigned 64-bit integer",
    "greater_than_equal": "unsigned 64-bit integer",
    "less_than_equal": "unsigned 64-bit integer",
    "list_type": "array",
    "model_type": "object",
    "model_attributes_type": "object",
    "url_type": "absolute URL",
    "url_parsing": "absolute URL",
    "url_syntax_violation": "absolute URL",
    "enum": "one of " + ", ".join(t.value for t in DisplayType),
    COLOR_FORMAT_ERROR: "6 hex digits",
    UNRECOGNIZED_ATTRIBUTE_SHAPE: "object with a string or number value",
}

_ERROR_TYPE_TO_EXCEPTION = {
    COLOR_FORMAT_ERROR: ColorFormatError,
    UNRECOGNIZED_ATTRIBUTE_SHAPE: UnrecognizedAttributeShapeError,
    "enum": UnknownEnumTokenError,
}

_VARIANT_TAGS = (NUMBER_ATTRIBUTE_TAG, STRING_ATTRIBUTE_TAG)


def error_path(loc: Sequence[Union[str, int]]) -> str:
    """
    Format a pydantic error location as a field path.

    ("attributes", 2, "number", "value") -> "attributes[2].value"; the
    variant tag the discriminated union adds to the location is dropped.
    """
    path = ""
    for i, item in enumerate(loc):
        if isinstance(item, int):
            path += f"[{item}]"
        elif item in _VARIANT_TAGS and (i == 0 or isinstance(loc[i - 1], int)):
            continue
        elif path:
            path += f".{item}"
        else:
            path = str(item)
    return path


def _translate(e: ValidationError) -> DecodeError:
    errors = e.errors(include_url=False)
    first = errors[0]
    loc = first["loc"]
    error_type = first["type"]
    raw = first.get("input")
    kwargs = dict(
        path=error_path(loc),
        expected=_EXPECTED_BY_ERROR_TYPE.get(error_type, first["msg"]),
        actual="missing" if error_type == "missing" else json_type(raw),
        raw=raw,
        errors=errors,
    )
    exc = _ERROR_TYPE_TO_EXCEPTION.get(error_type, StructuralError)
    if exc is UnrecognizedAttributeShapeError:
        index = next((item for item in loc if isinstance(item, int)), None)
        return exc(first["msg"], index=index, **kwargs)
    return exc(first["msg"], **kwargs)


def _parse_json(text: Union[str, bytes, bytearray]) -> Any:
    try:
        return json.loads(text)
    except (JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Failed to parse metadata JSON: {e}")
        raise StructuralError(
            f"Invalid JSON: {e}", expected="JSON object", actual="invalid JSON", raw=text
        ) from e


def decode(data: Union[str, bytes, bytearray, Mapping[str, Any]]) -> Metadata:
    """
    Decode token metadata.

    Args:
        data: JSON text, UTF-8 encoded JSON, or an already parsed JSON object

    Returns:
        Metadata instance

    Raises:
        StructuralError: missing required field, wrong JSON type or invalid JSON
        ColorFormatError: background_color is not "rrggbb"
        UnrecognizedAttributeShapeError: attribute entry with neither a string nor a number value
        UnknownEnumTokenError: unknown display_type
    """
    if isinstance(data, (str, bytes, bytearray)):
        data = _parse_json(data)
    return _validate(data)


def _validate(data: Any) -> Metadata:
    try:
        metadata = Metadata.model_validate(data)
    except ValidationError as e:
        error = _translate(e)
        logger.warning(f"Failed to decode metadata: {error}")
        raise error from e
    logger.debug(
        f"Decoded metadata {metadata.name!r} with {len(metadata.attributes)} attributes"
    )
    return metadata


def encode(metadata: Metadata) -> Dict[str, Any]:
    """
    Encode token metadata to a JSON object.

    Optional fields without a value are left out, `attributes` is
    always present.
    """
    return metadata.model_dump(mode="json", exclude_none=True)


def decode_attribute(data: Union[str, bytes, bytearray, Mapping[str, Any]]) -> AttributeEntry:
    """Decode a single entry of the `attributes` array."""
    if isinstance(data, (str, bytes, bytearray)):
        data = _parse_json(data)
    try:
        return attribute_adapter.validate_python(data)
    except ValidationError as e:
        error = _translate(e)
        logger.warning(f"Failed to decode attribute: {error}")
        raise error from e


def encode_attribute(entry: AttributeEntry) -> Dict[str, Any]:
    return attribute_adapter.dump_python(entry, mode="json", exclude_none=True)


def loads(text: Union[str, bytes, bytearray]) -> Metadata:
    """Decode token metadata from JSON text."""
    return _validate(_parse_json(text))


def dumps(metadata: Metadata, **kwargs) -> str:
    """Encode token metadata to JSON text. Extra kwargs go to `json.dumps`."""
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(encode(metadata), **kwargs)
