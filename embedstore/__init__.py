"""In-memory text embedding store with filtered similarity ranking."""

__version__ = "0.1.0"
