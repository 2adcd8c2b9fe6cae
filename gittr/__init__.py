"""Emoji-powered git commit helper CLI tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gittr")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
