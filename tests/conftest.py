import pytest

from nft_metadata import DisplayType, Metadata, NumberAttribute, Rgb8, StringAttribute


@pytest.fixture
def rocketeer_json() -> dict:
    return {
        "image": "https://example.com/rocketeers/1.jpg",
        "description": "Visit this planet in the Rocketeer universe.",
        "name": "Rocketeer X",
        "attributes": [
            {"trait_type": "Core", "value": "Vortex"},
            {"trait_type": "Outfit", "value": "Spacesuit"},
            {"trait_type": "Hat", "value": "Helmet"},
        ],
    }


@pytest.fixture
def full_metadata() -> Metadata:
    return Metadata(
        image="https://example.com/tokens/42.png",
        external_url="https://example.com/tokens/42",
        description="Token number 42",
        name="Token #42",
        attributes=[
            StringAttribute(trait_type="Core", value="Vortex"),
            NumberAttribute(trait_type="Level", value=5, display_type=DisplayType.NUMBER),
            NumberAttribute(trait_type="Stamina", value=2**64 - 1),
            NumberAttribute(
                trait_type="Birthday", value=1546360800, display_type=DisplayType.DATE
            ),
        ],
        background_color=Rgb8(r=242, g=242, b=242),
        animation_url="https://example.com/tokens/42.mp4",
        youtube_url="https://www.youtube.com/watch?v=abc123",
    )
