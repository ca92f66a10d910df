"""
Pytest configuration and shared fixtures for hexkit tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from hexkit.types import Digest, FixedHex  # noqa: E402


class NodeId(FixedHex):
    """16-byte identifier used across tests."""

    SIZE = 16


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def node_id_cls() -> type[NodeId]:
    """A FixedHex subclass with a 16-byte width."""
    return NodeId


@pytest.fixture
def sample_bytes() -> bytes:
    """Bytes covering the edges of the byte range."""
    return bytes([0x00, 0x01, 0x0A, 0x7F, 0x80, 0xFE, 0xFF])


@pytest.fixture
def sample_digest() -> Digest:
    """SHA-256 digest of b"hello"."""
    return Digest.of(b"hello")


@pytest.fixture
def hello_sha256_hex() -> str:
    return "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"
