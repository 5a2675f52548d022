"""Models and JSON codec for NFT metadata (OpenSea metadata standard)."""

from nft_metadata.codec import decode, decode_attribute, dumps, encode, encode_attribute, loads
from nft_metadata.color import Rgb8, rgb_from_hex, rgb_to_hex
from nft_metadata.exceptions import (
    ColorFormatError,
    DecodeError,
    MetadataError,
    StructuralError,
    UnknownEnumTokenError,
    UnrecognizedAttributeShapeError,
)
from nft_metadata.models import (
    AttributeEntry,
    DisplayType,
    Metadata,
    NumberAttribute,
    StringAttribute,
)

__all__ = [
    "decode",
    "encode",
    "loads",
    "dumps",
    "decode_attribute",
    "encode_attribute",
    "Metadata",
    "AttributeEntry",
    "StringAttribute",
    "NumberAttribute",
    "DisplayType",
    "Rgb8",
    "rgb_from_hex",
    "rgb_to_hex",
    "MetadataError",
    "DecodeError",
    "StructuralError",
    "ColorFormatError",
    "UnrecognizedAttributeShapeError",
    "UnknownEnumTokenError",
]
