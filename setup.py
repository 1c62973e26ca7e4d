"""Package metadata for roster (src layout, click CLI)."""

from setuptools import find_packages, setup

setup(
    name="roster",
    version="0.1.0",
    description="Interactive editor for a JSON-backed user roster",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "roster=roster.cli:main",
        ],
    },
)
