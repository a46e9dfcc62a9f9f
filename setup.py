"""Setup configuration for workdate package."""

from setuptools import find_namespace_packages, setup

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

TEST_REQUIRES = [
    "pytest>=7.4.0",
    "pytest-cov>=4.1.0",
]

setup(
    name="workdate",
    version="1.0.0",
    description="Date arithmetic helpers for business workflow scripts (day shifts, working days, hours)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="Daniel",
    packages=find_namespace_packages(include=["src", "src.*", "config"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        "python-dateutil>=2.8.2",
    ],
    extras_require={
        "test": TEST_REQUIRES,
        "dev": [
            *TEST_REQUIRES,
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "pre-commit>=3.4.0",
            "types-python-dateutil>=2.8.19",
        ],
    },
)
