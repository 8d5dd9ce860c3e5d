"""HTTP utilities."""

from embedstore.http.client import HTTPClient

__all__ = ["HTTPClient"]
