"""Setup configuration for pc-discovery tool."""

from setuptools import setup, find_packages

setup(
    name="pc-discovery",
    version="0.1.0",
    description="Find the PC on the local network by UDP broadcast",
    packages=find_packages(exclude=["tests", "tests.*"]),
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
            "pc-discovery=pc_discovery.cli:main",
        ],
    },
)
