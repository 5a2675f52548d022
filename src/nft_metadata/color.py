"""Background color values and their `rrggbb` hex form."""

import re
from dataclasses import dataclass

from nft_metadata.constants import COLOR_CHANNELS
from nft_metadata.exceptions import ColorFormatError
from nft_metadata.utils import json_type

_HEX_PAIRS = re.compile(r"(?:[0-9a-fA-F]{2})*")


@dataclass(frozen=True)
class Rgb8:
    """
    Color with three 8-bit channels.

    Attributes:
        r: Red channel (0-255).
        g: Green channel (0-255).
        b: Blue channel (0-255).
    """

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in ("r", "g", "b"):
            value = getattr(self, channel)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"Channel {channel} must be an int, got {value!r}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {channel} out of range: {value}")

    @classmethod
    def from_hex(cls, raw: str) -> "Rgb8":
        return rgb_from_hex(raw)

    def to_hex(self) -> str:
        return rgb_to_hex(self)


def rgb_from_hex(raw: str) -> Rgb8:
    """
    Parse a color from six hex digits without a leading "#".

    Args:
        raw: Hex string, ex. "f2f2f2". Case-insensitive.

    Returns:
        Rgb8 instance

    Raises:
        ColorFormatError: if raw is not exactly three hex-encoded bytes
    """
    if not isinstance(raw, str):
        raise ColorFormatError(
            "expected color hex string", expected="string", actual=json_type(raw), raw=raw
        )
    if not _HEX_PAIRS.fullmatch(raw):
        raise ColorFormatError(
            "color contains non-hex characters or an odd number of digits",
            expected="6 hex digits",
            actual=json_type(raw),
            raw=raw,
        )
    data = bytes.fromhex(raw)
    if len(data) != COLOR_CHANNELS:
        raise ColorFormatError(
            f"expected color hex string of {COLOR_CHANNELS} bytes, got {len(data)}",
            expected="6 hex digits",
            actual=json_type(raw),
            raw=raw,
        )
    return Rgb8(r=data[0], g=data[1], b=data[2])


def rgb_to_hex(color: Rgb8) -> str:
    """Format a color as six lowercase hex digits."""
    return bytes((color.r, color.g, color.b)).hex()
