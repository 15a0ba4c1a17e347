"""Minimal HTTP file server: URL paths map onto files under one root directory."""

from .server import create_app, main, make_server

__version__ = "0.1.0"

__all__ = ["create_app", "main", "make_server", "__version__"]
