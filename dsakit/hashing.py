"""Hash functions for the key types the hash table supports."""

from __future__ import annotations

_WORD = 1 << 64


def hash_int(key: int) -> int:
    """Hash an integer: its value as an unsigned 64-bit word."""
    return key % _WORD


def hash_str(key: str) -> int:
    """Hash a string with the multiplier 31 over its UTF-8 bytes.

    Bytes are read as signed characters and the result wraps at 64 bits.
    """
    h = 0
    for byte in key.encode("utf-8"):
        char = byte - 256 if byte >= 128 else byte
        h = (31 * h + char) % _WORD
    return h


def hash_key(key: object) -> int:
    """Hash ``key`` with the function for its type."""
    if isinstance(key, bool):
        raise TypeError("No hash function defined for this key type.")
    if isinstance(key, int):
        return hash_int(key)
    if isinstance(key, str):
        return hash_str(key)
    raise TypeError("No hash function defined for this key type.")