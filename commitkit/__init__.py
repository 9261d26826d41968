"""Conventional commit composer, validator and changelog tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("commitkit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
