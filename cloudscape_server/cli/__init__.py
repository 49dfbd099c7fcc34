"""Command-line interface for Cloudscape Server."""

from cloudscape_server import __version__

__all__ = ["__version__"]
