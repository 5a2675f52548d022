import pytest

from nft_metadata import (
    ColorFormatError,
    Rgb8,
    StructuralError,
    decode,
    encode,
    rgb_from_hex,
    rgb_to_hex,
)


def test_from_hex():
    assert rgb_from_hex("f2f2f2") == Rgb8(r=242, g=242, b=242)


def test_from_hex_is_case_insensitive():
    assert rgb_from_hex("F2f2FF") == Rgb8(r=242, g=242, b=255)


def test_to_hex():
    assert rgb_to_hex(Rgb8(r=242, g=242, b=242)) == "f2f2f2"


def test_to_hex_pads_channels():
    assert Rgb8(r=0, g=10, b=255).to_hex() == "000aff"
    assert Rgb8.from_hex("000aff") == Rgb8(r=0, g=10, b=255)


@pytest.mark.parametrize("raw", ["f2f2f2f2", "f2f2", "", "f2f2f", "#f2f2f2", "zzzzzz", "f2 f2 f2"])
def test_from_hex_malformed(raw):
    with pytest.raises(ColorFormatError) as e:
        rgb_from_hex(raw)
    assert e.value.raw == raw


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 1.5)])
def test_channel_out_of_range(channels):
    r, g, b = channels
    with pytest.raises(ValueError):
        Rgb8(r=r, g=g, b=b)


def test_metadata_background_color(rocketeer_json):
    rocketeer_json["background_color"] = "F2F2F2"
    metadata = decode(rocketeer_json)
    assert metadata.background_color == Rgb8(r=242, g=242, b=242)
    assert encode(metadata)["background_color"] == "f2f2f2"


def test_metadata_malformed_background_color(rocketeer_json):
    rocketeer_json["background_color"] = "f2f2f2f2"
    with pytest.raises(ColorFormatError) as e:
        decode(rocketeer_json)
    assert e.value.path == "background_color"
    assert e.value.raw == "f2f2f2f2"


def test_metadata_background_color_wrong_type(rocketeer_json):
    rocketeer_json["background_color"] = 15921906
    with pytest.raises(StructuralError) as e:
        decode(rocketeer_json)
    assert e.value.path == "background_color"
    assert e.value.actual == "number"


def test_metadata_without_background_color(rocketeer_json):
    metadata = decode(rocketeer_json)
    assert metadata.background_color is None
    assert "background_color" not in encode(metadata)


def test_from_hex_reports_json_types():
    with pytest.raises(ColorFormatError) as e:
        rgb_from_hex(15921906)
    assert e.value.actual == "number"
    with pytest.raises(ColorFormatError) as e:
        rgb_from_hex("f2f2f2f2")
    assert e.value.actual == "string"
