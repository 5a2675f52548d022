"""
Example of normalizing token metadata.
Reads a metadata JSON file, validates it and prints the normalized form.
"""
import sys

from loguru import logger

from nft_metadata import DecodeError, NumberAttribute, dumps, loads


def main(path: str):
    """Decode metadata from a file and print it back."""
    with open(path, "rb") as f:
        raw = f.read()

    try:
        metadata = loads(raw)
    except DecodeError as e:
        logger.error(f"Invalid metadata in {path}: {e} (expected {e.expected}, got {e.actual})")
        sys.exit(1)

    print(f"{metadata.name}: {len(metadata.attributes)} attributes")
    for entry in metadata.attributes:
        if isinstance(entry, NumberAttribute) and entry.display_type:
            print(f"  {entry.trait_type} = {entry.value} ({entry.display_type.value})")
        else:
            print(f"  {entry.trait_type} = {entry.value}")

    print(dumps(metadata, indent=2))


if __name__ == "__main__":
    main(sys.argv[1])
