from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="guild-lucite",
    packages=find_packages("src"),
    package_dir={"": "src"},
    version="1.0.0",
    description="Batch minting of non-transferable Guild Lucite tokens from a CSV",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    python_requires=">=3.9",
    install_requires=[
        "aiohttp",
        "loguru",
        "pydantic>=2",
        "python-dotenv",
        "web3>=7",
        "multiformats",
    ],
    extras_require={"test": ["pytest", "pytest-asyncio"]},
    entry_points={"console_scripts": ["guild-lucite=guild_lucite.cli:main"]},
)
