"""Akismet REST API client."""

from .client import AkismetAPIError, AkismetClient

__all__ = ["AkismetAPIError", "AkismetClient"]
