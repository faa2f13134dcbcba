"""
JSONPlaceholder client utility.

CRUD for users, open todos, and export of the comments on a user's
most recent post to a JSON file.
"""

from .api import ClientError, ErrorKind, JsonCodec, PlaceholderClient
from .files import FileManager

__version__ = "1.0.0"

__all__ = ["PlaceholderClient", "JsonCodec", "ClientError", "ErrorKind", "FileManager"]
