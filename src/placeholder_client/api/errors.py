"""
Client Errors

Every failure raised by the client is a ClientError tagged with the
stage that failed.
"""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Stage at which an operation failed."""
    TRANSPORT = "transport"
    ENCODING = "encoding"
    DECODING = "decoding"
    EMPTY_RESULT = "empty_result"
    FILE_WRITE = "file_write"


class ClientError(RuntimeError):
    """
    Uniform failure of a client operation.

    Attributes:
        kind: The ErrorKind of the failure.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        cause: Optional[BaseException] = None
    ):
        super().__init__(f"{kind.value}: {message}")
        self.kind = kind
        self.cause = cause
