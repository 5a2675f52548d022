"""NFT token metadata models (OpenSea metadata standard)."""

from enum import Enum
from typing import Annotated, Any, List, Mapping, Optional, Union

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
    TypeAdapter,
    field_serializer,
    field_validator,
)
from pydantic_core import PydanticCustomError

from nft_metadata.color import Rgb8, rgb_from_hex, rgb_to_hex
from nft_metadata.constants import (
    COLOR_FORMAT_ERROR,
    NUMBER_ATTRIBUTE_TAG,
    STRING_ATTRIBUTE_TAG,
    U64_MAX,
    UNRECOGNIZED_ATTRIBUTE_SHAPE,
)
from nft_metadata.exceptions import ColorFormatError


class DisplayType(str, Enum):
    """How a numerical attribute should be displayed."""

    NUMBER = "number"
    BOOST_PERCENTAGE = "boost_percentage"
    BOOST_NUMBER = "boost_number"
    DATE = "date"


class StringAttribute(BaseModel):
    """Textual attribute, ex. {"trait_type": "Core", "value": "Vortex"}."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    trait_type: str
    value: str


class NumberAttribute(BaseModel):
    """Numerical attribute, ex. {"trait_type": "Level", "value": 5, "display_type": "number"}."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    trait_type: str
    value: int = Field(..., strict=True, ge=0, le=U64_MAX)  # unsigned 64-bit
    display_type: Optional[DisplayType] = None


def attribute_tag(entry: Any) -> Optional[str]:
    """
    Pick the attribute variant from the type of its `value`.

    Numbers are checked first, so a numeric value never ends up
    in a StringAttribute. Returns None if neither variant fits.
    """
    if isinstance(entry, Mapping):
        value = entry.get("value")
    else:
        value = getattr(entry, "value", None)

    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return NUMBER_ATTRIBUTE_TAG
    if isinstance(value, str):
        return STRING_ATTRIBUTE_TAG
    return None


AttributeEntry = Annotated[
    Union[
        Annotated[NumberAttribute, Tag(NUMBER_ATTRIBUTE_TAG)],
        Annotated[StringAttribute, Tag(STRING_ATTRIBUTE_TAG)],
    ],
    Discriminator(
        attribute_tag,
        custom_error_type=UNRECOGNIZED_ATTRIBUTE_SHAPE,
        custom_error_message="Attribute value should be a string or a number",
    ),
]

attribute_adapter = TypeAdapter(AttributeEntry)


class Metadata(BaseModel):
    """
    Metadata for a token.

    Attributes:
        image: URL to image of the item.
        external_url: External URL to another site.
        description: Human-readable description of the item.
        name: Name of the item.
        attributes: Attributes for the item, in display order.
        background_color: Background color of the item, "rrggbb" on the wire.
        animation_url: URL to multi-media attachment for the item.
        youtube_url: URL to a YouTube video.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    image: AnyUrl
    external_url: Optional[AnyUrl] = None
    description: str
    name: str
    attributes: List[AttributeEntry] = Field(default_factory=list)
    background_color: Optional[Rgb8] = None
    animation_url: Optional[AnyUrl] = None
    youtube_url: Optional[AnyUrl] = None

    @field_validator("background_color", mode="before")
    def parse_background_color(cls, v):
        """Parse color from hex string."""
        if v is None or isinstance(v, Rgb8):
            return v
        if not isinstance(v, str):
            raise PydanticCustomError("string_type", "Input should be a valid string")
        try:
            return rgb_from_hex(v)
        except ColorFormatError as e:
            raise PydanticCustomError(
                COLOR_FORMAT_ERROR,
                "Malformed color {raw}: {reason}",
                {"raw": v, "reason": e.message},
            )

    @field_serializer("background_color")
    def dump_background_color(self, v: Optional[Rgb8]) -> Optional[str]:
        if v is None:
            return None
        return rgb_to_hex(v)
