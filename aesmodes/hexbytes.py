"""Conversions between hex text and byte strings."""

from __future__ import annotations

_HEX_CHARS = frozenset("0123456789abcdefABCDEF")


def is_hex(ch: str) -> bool:
    """Return True if ``ch`` is a single hexadecimal digit."""
    return len(ch) == 1 and ch in _HEX_CHARS


def hex_digit(ch: str) -> int:
    """Return the value 0-15 of one hexadecimal digit."""
    if not is_hex(ch):
        raise ValueError(f"{ch!r} is not a hex value")
    return int(ch, 16)


def hex_byte(pair: str) -> int:
    """Return the byte value of two hexadecimal digits, high digit first."""
    if len(pair) != 2:
        raise ValueError(f"expected two hex digits, got {pair!r}")
    return hex_digit(pair[0]) * 16 + hex_digit(pair[1])


def hex_to_bytes(text: str) -> bytes:
    """Decode a string of hexadecimal digit pairs into bytes."""
    if len(text) % 2:
        raise ValueError("hex string must have an even number of digits")
    return bytes(hex_byte(text[i:i + 2]) for i in range(0, len(text), 2))


def format_bytes(data: bytes, label: str | None = None) -> str:
    """Render bytes as space-separated hex pairs, optionally with a label."""
    prefix = f"{label} = " if label is not None else ""
    return prefix + "".join(f"{b:02x} " for b in data)


def xor_bytes(data: bytes, other: bytes) -> bytes:
    """XOR two byte strings of equal length."""
    if len(data) != len(other):
        raise ValueError("byte strings must have the same length")
    return bytes(a ^ b for a, b in zip(data, other))