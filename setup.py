from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="nft-metadata",
    packages=find_packages("src"),
    package_dir={"": "src"},
    version="1.0.0",
    description="Typed models and JSON codec for OpenSea-style NFT metadata",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Petr Volnov",
    license="MIT",
    python_requires=">=3.9",
    install_requires=["pydantic>=2.5", "pydantic-core", "loguru"],
    extras_require={"test": ["pytest"]},
)
