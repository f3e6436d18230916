"""
Setup script for unravel-array

Pure Python package in src/ layout. This script:
1. Reads the version from src/unravel/__init__.py
2. Uses README.md as the long description when present
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/unravel/__init__.py
def get_version():
    version_file = Path("src/unravel/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="unravel-array",
    version=get_version(),
    description="Lazy row, column and cell traversal of two dimensional arrays",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    zip_safe=True,
)
