"""
Authentication for the UQPAY API.
"""

from .token import CachedToken, TokenProvider, TokenSource

__all__ = [
    "CachedToken",
    "TokenProvider",
    "TokenSource",
]
