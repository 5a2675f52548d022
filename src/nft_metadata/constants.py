"""Constants for NFT metadata encoding."""

# Largest value a numeric attribute can hold (unsigned 64-bit)
U64_MAX = 2**64 - 1

# Number of channels in a background color
COLOR_CHANNELS = 3

# Custom pydantic error type raised for malformed colors
COLOR_FORMAT_ERROR = "color_format"

# Tags used to route attribute entries to their variant
NUMBER_ATTRIBUTE_TAG = "number"
STRING_ATTRIBUTE_TAG = "string"

# Custom pydantic error type raised for attribute entries of neither variant
UNRECOGNIZED_ATTRIBUTE_SHAPE = "unrecognized_attribute_shape"
