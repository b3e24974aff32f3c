"""Setup script for digestkit."""

from setuptools import find_packages, setup

setup(
    name="digestkit",
    version="0.1.0",
    description="Typed content digests: parse, render, compute and verify checksums",
    python_requires=">=3.10",
    packages=find_packages(include=["digestkit", "digestkit.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        'tomli>=2.0; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "digestkit=digestkit.__main__:main",
        ],
    },
)
