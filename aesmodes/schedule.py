"""AES-128 key expansion on 32-bit words."""

from __future__ import annotations

import struct

ROUNDS = 10
BLOCK_SIZE = 16
WORD_MASK = 0xFFFFFFFF

RCON: tuple[int, ...] = (
    0x01000000, 0x02000000, 0x04000000, 0x08000000, 0x10000000,
    0x20000000, 0x40000000, 0x80000000, 0x1B000000, 0x36000000,
)

SBOX: bytes = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

RoundKey = tuple[int, int, int, int]


def rot_word(word: int) -> int:
    """Rotate a 32-bit word left by one byte."""
    word &= WORD_MASK
    return ((word << 8) | (word >> 24)) & WORD_MASK


def sub_word(word: int) -> int:
    """Apply the S-box to each byte of a 32-bit word."""
    word &= WORD_MASK
    return int.from_bytes(bytes(SBOX[b] for b in word.to_bytes(4, "big")), "big")


def _check_key(key: bytes) -> bytes:
    key = bytes(key)
    if len(key) != BLOCK_SIZE:
        raise ValueError(f"key must be {BLOCK_SIZE} bytes, got {len(key)}")
    return key


def key_schedule(key: bytes) -> tuple[RoundKey, ...]:
    """Expand a 16-byte key into 11 round keys of four 32-bit words each."""
    words = list(struct.unpack(">4I", _check_key(key)))
    for i in range(4, 4 * (ROUNDS + 1)):
        tmp = words[i - 1]
        if i % 4 == 0:
            tmp = sub_word(rot_word(tmp)) ^ RCON[i // 4 - 1]
        words.append(words[i - 4] ^ tmp)
    return tuple(
        (words[r], words[r + 1], words[r + 2], words[r + 3])
        for r in range(0, len(words), 4)
    )


def key_schedule_bytes(key: bytes) -> list[bytes]:
    """Expand a 16-byte key into 11 round keys of 16 bytes each."""
    return [struct.pack(">4I", *round_key) for round_key in key_schedule(key)]