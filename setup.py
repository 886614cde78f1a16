#!/usr/bin/env python
"""cargo-bsp installer setup script."""

from pathlib import Path

from setuptools import find_packages, setup

# Get project root
PROJECT_ROOT = Path(__file__).parent.resolve()

# Package information for the installer
PACKAGE_INFO = {
    "name": "cargo-bsp-installer",
    "version": "0.1.0",
    "description": "Build the cargo-bsp server and register it in a Rust project",
    "python_requires": ">=3.10",
    "install_requires": [
        "loguru>=0.7",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    "extras_require": {
        "test": ["pytest>=7.0"],
    },
    "packages": find_packages(where=str(PROJECT_ROOT), include=["cargo_bsp_installer", "cargo_bsp_installer.*"]),
    "package_data": {"cargo_bsp_installer.config": ["settings.yaml"]},
    "entry_points": {
        "console_scripts": ["cargo-bsp-install=cargo_bsp_installer.cli:main"],
    },
}

setup(**PACKAGE_INFO)
