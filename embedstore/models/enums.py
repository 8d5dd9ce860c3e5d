"""Enumeration types for embedstore."""

from enum import Enum


class ProviderErrorType(str, Enum):
    """Failure kinds surfaced by embedding providers."""
    AUTH = "auth"
    TRANSIENT = "transient"
    RESPONSE = "response"


class ProviderName(str, Enum):
    """Supported embedding backends."""
    OPENAI = "openai"
    OLLAMA = "ollama"
