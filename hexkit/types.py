"""
Hex-capable value types.

FixedHex is the base for fixed-width byte values (hashes, keys,
identifiers). Subclasses declare SIZE and get the Hex protocol,
value semantics and Pydantic field support for free:

    class NodeId(FixedHex):
        SIZE = 16

    class Peer(BaseModel):
        node_id: NodeId          # accepts hex str, bytes or NodeId
                                 # dumps as a hex str

HexBytes covers variable-length byte fields the same way.
"""
from __future__ import annotations

import hashlib
from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import BeforeValidator, GetCoreSchemaHandler, GetJsonSchemaHandler, PlainSerializer, WithJsonSchema
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .errors import HexConversionError
from .hex import ScalarSerializer, from_hex, serialize_to_hex, to_hex

_SCALAR = ScalarSerializer()

F = TypeVar("F", bound="FixedHex")


def _serialize_hex(value: Any) -> str:
    return serialize_to_hex(value, _SCALAR)


class FixedHex:
    """
    Immutable byte string of exactly SIZE bytes.

    Construction from the wrong number of bytes raises HexConversionError
    with the expected and actual sizes in its details.
    """

    SIZE: ClassVar[int] = 0

    __slots__ = ("_data",)

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        data = bytes(data)
        if len(data) != self.SIZE:
            raise HexConversionError(
                details={
                    "type": type(self).__name__,
                    "expected": self.SIZE,
                    "actual": len(data),
                }
            )
        self._data = data

    @classmethod
    def from_bytes(cls: type[F], data: bytes | bytearray | memoryview) -> F:
        return cls(data)

    @classmethod
    def from_hex(cls: type[F], hex_str: str) -> F:
        """Decode a hex string of exactly 2 * SIZE digits."""
        return cls(from_hex(hex_str))

    def to_hex(self) -> str:
        return to_hex(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self), self._data))

    def __str__(self) -> str:
        return self.to_hex()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_hex()!r})"

    # -------------------------------------------------------------------------
    # Pydantic integration
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls: type[F], value: Any) -> F:
        if isinstance(value, cls):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value)
        if isinstance(value, str):
            return cls.from_hex(value)
        raise HexConversionError(
            details={"type": cls.__name__, "input_type": type(value).__name__}
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_hex,
                return_schema=core_schema.str_schema(),
                when_used="always",
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls,
        schema: core_schema.CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": f"^(0x)?[0-9a-fA-F]{{{2 * cls.SIZE}}}$",
            "minLength": 2 * cls.SIZE,
        }


class Digest(FixedHex):
    """32-byte SHA-256 digest."""

    SIZE = 32

    __slots__ = ()

    @classmethod
    def of(cls: type[F], data: bytes | bytearray | memoryview) -> F:
        return cls(hashlib.sha256(data).digest())


def _bytes_from_hex(value: Any) -> Any:
    if isinstance(value, str):
        return from_hex(value)
    return value


# Variable-length bytes field: validates from hex, dumps as hex
HexBytes = Annotated[
    bytes,
    BeforeValidator(_bytes_from_hex),
    PlainSerializer(to_hex, return_type=str, when_used="always"),
    WithJsonSchema({"type": "string", "pattern": "^(0x)?([0-9a-fA-F]{2})*$"}),
]


__all__ = [
    "FixedHex",
    "Digest",
    "HexBytes",
]
