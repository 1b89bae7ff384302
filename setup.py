"""Setup configuration for zest."""

from setuptools import setup, find_packages

setup(
    name="zest",
    version="0.1.0",
    description="Test runner with per-module setup and teardown hooks",
    packages=find_packages(include=["zest", "zest.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "zest=zest.cli:main",
        ],
    },
)
