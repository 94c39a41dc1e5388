"""Packaging for the Chirp SDK (pure Python, ``src/`` layout)."""

from setuptools import find_namespace_packages, setup

setup(
    name="chirp-sdk",
    version="0.1.0",
    description="Async Python client for the Chirp social REST API",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["chirp_sdk", "chirp_sdk.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
)
