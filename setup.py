# pylint: disable=missing-module-docstring
# ruff: noqa

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description() -> str:
    """Return README contents for PyPI description."""
    readme_path = Path(__file__).with_name("README.md")
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else "LinkedCraft"


setup(
    name="linkedcraft",
    version="0.1.0",
    description="Trending LinkedIn topic suggestions with a cached skills-to-topics pipeline",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["linkedcraft", "linkedcraft.*", "trend_engine", "trend_engine.*", "fetchers", "fetchers.*"]),
    include_package_data=True,
    install_requires=[
        "pandas>=2.0",
        "httpx>=0.26",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "openai>=1.12",
        "anthropic>=0.25",
        "fastapi>=0.110",
        "uvicorn>=0.27",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "linkedcraft-serve = linkedcraft.cli_entrypoints:serve",
            "linkedcraft-trends = linkedcraft.cli_entrypoints:trends_main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
