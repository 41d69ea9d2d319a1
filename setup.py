from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="movietrack-core",
    version="0.1.0",
    # Repo convention: code lives under `backend/`, split into layers that are
    # importable as top-level packages (`domain`, `application`, `infrastructure`).
    package_dir={"": "backend"},
    packages=find_packages(
        where="backend",
        include=[
            "domain",
            "domain.*",
            "application",
            "application.*",
            "infrastructure",
            "infrastructure.*",
        ],
    ),
    python_requires=">=3.10",
    install_requires=[
        "pydantic==2.10.6",
        "aiohttp>=3.9",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=8.0"],
    },
)
