"""
JSON Codec

Converts entities to JSON text and back. A codec is an immutable value
owned by whoever constructs it; there is no shared module-level codec.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Type, TypeVar

from .errors import ClientError, ErrorKind


T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(item) for item in value]
    return value


@dataclass(frozen=True)
class JsonCodec:
    """
    JSON encoder/decoder for API entities.

    Attributes:
        indent: Indentation used by encode_pretty.
        ensure_ascii: Escape non-ASCII characters when encoding.
    """
    indent: int = 4
    ensure_ascii: bool = False

    def encode(self, value: Any) -> str:
        """
        Encode an entity, a list of entities, or plain JSON data.

        Raises:
            ClientError: ENCODING if the value cannot be represented as JSON.
        """
        return self._dumps(value, indent=None)

    def encode_pretty(self, value: Any) -> str:
        """Encode like encode(), indented for humans."""
        return self._dumps(value, indent=self.indent)

    def decode(self, entity_type: Type[T], text: str) -> T:
        """
        Decode a single JSON object into an entity.

        Raises:
            ClientError: DECODING if the text is not valid JSON or does not
                match the entity's shape.
        """
        data = self._loads(text)
        try:
            return entity_type.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ClientError(
                ErrorKind.DECODING,
                f"Response does not match {entity_type.__name__}: {e!r}",
                cause=e
            ) from e

    def decode_list(self, entity_type: Type[T], text: str) -> List[T]:
        """Decode a JSON array into a list of entities, keeping order."""
        data = self._loads(text)
        if not isinstance(data, list):
            raise ClientError(
                ErrorKind.DECODING,
                f"Expected a JSON array of {entity_type.__name__}, got {type(data).__name__}"
            )
        try:
            return [entity_type.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError) as e:
            raise ClientError(
                ErrorKind.DECODING,
                f"Response does not match {entity_type.__name__}: {e!r}",
                cause=e
            ) from e

    def _dumps(self, value: Any, indent) -> str:
        try:
            return json.dumps(
                _to_jsonable(value),
                indent=indent,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False
            )
        except (TypeError, ValueError) as e:
            raise ClientError(ErrorKind.ENCODING, f"Cannot encode {type(value).__name__}: {e}", cause=e) from e

    def _loads(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise ClientError(ErrorKind.DECODING, f"Invalid JSON in response: {e}", cause=e) from e
