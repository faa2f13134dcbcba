"""
API Client Module

Provides the HTTP client, entities, codec and errors for the
JSONPlaceholder API.
"""

from .client import PlaceholderClient
from .codec import JsonCodec
from .errors import ClientError, ErrorKind
from .models import Address, Comment, Company, Geo, Post, Todo, User

__all__ = [
    "PlaceholderClient",
    "JsonCodec",
    "ClientError",
    "ErrorKind",
    "Address",
    "Comment",
    "Company",
    "Geo",
    "Post",
    "Todo",
    "User",
]
