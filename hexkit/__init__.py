"""
hexkit - conversion between binary data and hex strings.

Exports the codec functions, the Hex protocol and its error taxonomy,
plus the fixed-width types and canonical serialization built on them.
"""

from .errors import (
    CanonicalizationException,
    ErrorCodes,
    HexConversionError,
    HexError,
    HexkitError,
    HexkitException,
    InvalidCharacter,
    LengthError,
)
from .hex import (
    Hex,
    ScalarSerializer,
    Serializer,
    from_hex,
    serialize_to_hex,
    to_hex,
    to_hex_multiple,
)
from .types import Digest, FixedHex, HexBytes
from .canonical import (
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    loads_canonical,
    to_canonical_json_dict,
)

__version__ = "0.1.0"

__all__ = [
    # Codec
    "to_hex",
    "to_hex_multiple",
    "from_hex",
    "Hex",
    "Serializer",
    "ScalarSerializer",
    "serialize_to_hex",
    # Errors
    "ErrorCodes",
    "HexkitError",
    "HexkitException",
    "CanonicalizationException",
    "HexError",
    "InvalidCharacter",
    "LengthError",
    "HexConversionError",
    # Types
    "FixedHex",
    "Digest",
    "HexBytes",
    # Canonical serialization
    "canonicalize_value",
    "to_canonical_json_dict",
    "dumps_canonical",
    "loads_canonical",
    "canonical_equals",
]
