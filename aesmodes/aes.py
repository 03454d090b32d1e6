"""AES-128 block encryption with 32-bit tables and byte-oriented decryption."""

from __future__ import annotations

import struct
from collections.abc import Sequence

from aesmodes.schedule import BLOCK_SIZE, SBOX, WORD_MASK, key_schedule, key_schedule_bytes

State = tuple[int, int, int, int]

_AES_POLY = 0x11B

_INV_MIX_MATRIX: tuple[tuple[int, ...], ...] = (
    (0x0E, 0x0B, 0x0D, 0x09),
    (0x09, 0x0E, 0x0B, 0x0D),
    (0x0D, 0x09, 0x0E, 0x0B),
    (0x0B, 0x0D, 0x09, 0x0E),
)

# Position each byte of the state takes after rotating row r right by r places.
_INV_SHIFT = (0, 13, 10, 7, 4, 1, 14, 11, 8, 5, 2, 15, 12, 9, 6, 3)


def gf_mul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo the AES polynomial."""
    a &= 0xFF
    b &= 0xFF
    result = 0
    while b:
        if b & 1:
            result ^= a
        a <<= 1
        if a & 0x100:
            a ^= _AES_POLY
        b >>= 1
    return result


def _ror(word: int, bits: int) -> int:
    return ((word >> bits) | (word << (32 - bits))) & WORD_MASK


TE0: tuple[int, ...] = tuple(
    (gf_mul(s, 2) << 24) | (s << 16) | (s << 8) | gf_mul(s, 3) for s in SBOX
)
TE1: tuple[int, ...] = tuple(_ror(w, 8) for w in TE0)
TE2: tuple[int, ...] = tuple(_ror(w, 16) for w in TE0)
TE3: tuple[int, ...] = tuple(_ror(w, 24) for w in TE0)
TE4: tuple[int, ...] = tuple(s * 0x01010101 for s in SBOX)

_inv = [0] * 256
for _i, _s in enumerate(SBOX):
    _inv[_s] = _i
ISBOX: bytes = bytes(_inv)
del _inv


def _check_block(block: bytes, what: str = "block") -> bytes:
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"{what} must be {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def bytes_to_state(block: bytes) -> State:
    """Pack 16 bytes into four big-endian 32-bit column words."""
    return struct.unpack(">4I", _check_block(block))


def state_to_bytes(state: Sequence[int]) -> bytes:
    """Unpack four 32-bit column words into 16 bytes."""
    if len(state) != 4:
        raise ValueError("state must hold four words")
    return struct.pack(">4I", *(w & WORD_MASK for w in state))


def format_state(state: Sequence[int]) -> str:
    """Render a state as four 8-digit hex words."""
    return "".join(f"{w & WORD_MASK:08x} " for w in state)


def encrypt_round(state: Sequence[int], round_key: Sequence[int]) -> State:
    """One full round: SubBytes, ShiftRows, MixColumns and AddRoundKey via tables."""
    s = tuple(state)
    return tuple(
        TE0[s[i] >> 24]
        ^ TE1[(s[(i + 1) % 4] >> 16) & 0xFF]
        ^ TE2[(s[(i + 2) % 4] >> 8) & 0xFF]
        ^ TE3[s[(i + 3) % 4] & 0xFF]
        ^ round_key[i]
        for i in range(4)
    )


def _final_round(state: State, round_key: Sequence[int]) -> State:
    s = state
    return tuple(
        (TE4[s[i] >> 24] & 0xFF000000)
        ^ (TE4[(s[(i + 1) % 4] >> 16) & 0xFF] & 0x00FF0000)
        ^ (TE4[(s[(i + 2) % 4] >> 8) & 0xFF] & 0x0000FF00)
        ^ (TE4[s[(i + 3) % 4] & 0xFF] & 0x000000FF)
        ^ round_key[i]
        for i in range(4)
    )


def encrypt_block(plaintext: bytes, key: bytes) -> bytes:
    """Encrypt one 16-byte block with a 16-byte key."""
    round_keys = key_schedule(key)
    state = tuple(w ^ k for w, k in zip(bytes_to_state(plaintext), round_keys[0]))
    for round_key in round_keys[1:10]:
        state = encrypt_round(state, round_key)
    return state_to_bytes(_final_round(state, round_keys[10]))


def add_round_key(state: bytes, round_key: bytes) -> bytes:
    """XOR a 16-byte round key into the state."""
    state = _check_block(state, "state")
    round_key = _check_block(round_key, "round key")
    return bytes(a ^ b for a, b in zip(state, round_key))


def inv_sub_bytes(state: bytes) -> bytes:
    """Apply the inverse S-box to every byte."""
    return bytes(ISBOX[b] for b in _check_block(state, "state"))


def inv_shift_rows(state: bytes) -> bytes:
    """Rotate row r of the column-major state right by r places."""
    state = _check_block(state, "state")
    return bytes(state[i] for i in _INV_SHIFT)


def inv_mix_columns(state: bytes) -> bytes:
    """Multiply each column by the inverse MixColumns matrix."""
    state = _check_block(state, "state")
    out = bytearray()
    for col in range(0, BLOCK_SIZE, 4):
        column = state[col:col + 4]
        for row in _INV_MIX_MATRIX:
            value = 0
            for coeff, b in zip(row, column):
                value ^= gf_mul(coeff, b)
            out.append(value)
    return bytes(out)


def decrypt_block(ciphertext: bytes, key: bytes) -> bytes:
    """Decrypt one 16-byte block with a 16-byte key."""
    round_keys = key_schedule_bytes(key)
    state = add_round_key(ciphertext, round_keys[10])
    for round_key in reversed(round_keys[1:10]):
        state = inv_mix_columns(inv_shift_rows(inv_sub_bytes(state)))
        state = add_round_key(state, inv_mix_columns(round_key))
    state = inv_shift_rows(inv_sub_bytes(state))
    return add_round_key(state, round_keys[0])