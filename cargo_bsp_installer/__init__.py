"""Installer that registers the cargo-bsp build server in a Rust project."""

__version__ = "0.1.0"
