"""Configuration exports for the installer."""

from .loader import InstallerConfigLoader, load_settings

__all__ = ["InstallerConfigLoader", "load_settings"]
