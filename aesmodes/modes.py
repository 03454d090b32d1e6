"""ECB and CBC modes over AES-128 with 0x80 padding, plus file helpers."""

from __future__ import annotations

import argparse
import os
from pathlib import Path

from aesmodes.aes import decrypt_block, encrypt_block
from aesmodes.hexbytes import xor_bytes
from aesmodes.schedule import BLOCK_SIZE

PADDING_START = 0x80
ZERO_KEY = bytes(BLOCK_SIZE)
ZERO_IV = bytes(BLOCK_SIZE)

SAMPLE_CHUNK = b"Yongbhin"
SAMPLE_REPEAT = 40

KEY_LABEL = b"KEY = "
PLAINTEXT_LABEL = b"PLAINTEXT = "
IV_LABEL = b"IV = "
CIPHERTEXT_LABEL = b"CIPHERTEXT = "

MMT_KEY = bytes.fromhex("0700d603a1c514e46b6191ba430a3a0c")
MMT_IV = bytes.fromhex("aad1583cd91365e3bb2f0c3430d065bb")
MMT_PLAINTEXT = (
    bytes.fromhex("068b25c7bfb1f8bdd4cfc908f69dffc5"),
    bytes.fromhex("ddc726a197f0e5f720f730393279be91"),
)
MMT_CIPHERTEXT = (
    bytes.fromhex("c4dc61d9725967a3020104a9738f2386"),
    bytes.fromhex("8527ce839aab1752fd8bdb95a82c4d00"),
)


class CiphertextSizeError(ValueError):
    """Raised when ciphertext is empty or not a whole number of blocks."""


def file_size(path: str | os.PathLike[str]) -> int:
    """Return the size of a file in bytes."""
    return Path(path).stat().st_size


def pad_block(data: bytes) -> bytes:
    """Pad 0-16 bytes to one block: append 0x80 then zeros; a full block is kept."""
    data = bytes(data)
    if len(data) > BLOCK_SIZE:
        raise ValueError(f"cannot pad more than {BLOCK_SIZE} bytes, got {len(data)}")
    if len(data) == BLOCK_SIZE:
        return data
    return data + bytes([PADDING_START]) + bytes(BLOCK_SIZE - len(data) - 1)


def strip_padding(block: bytes) -> bytes:
    """Return the bytes before the last 0x80 marker, or nothing if none precedes it."""
    index = bytes(block).rfind(PADDING_START)
    return bytes(block[:index]) if index > 0 else b""


def _split_for_padding(data: bytes) -> tuple[bytes, bytes]:
    full = len(data) - len(data) % BLOCK_SIZE
    return data[:full], data[full:]


def _blocks(data: bytes):
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start:start + BLOCK_SIZE]


def _check_ciphertext(data: bytes) -> bytes:
    data = bytes(data)
    if not data or len(data) % BLOCK_SIZE:
        raise CiphertextSizeError(
            f"ciphertext size must be a positive multiple of {BLOCK_SIZE}, got {len(data)}"
        )
    return data


def pad_file(src: str | os.PathLike[str], dst: str | os.PathLike[str]) -> None:
    """Copy a file, padding its last block; a whole-block file gains a full padding block."""
    data = Path(src).read_bytes()
    body, rest = _split_for_padding(data)
    Path(dst).write_bytes(body + pad_block(rest))


def generate_sample_file(path: str | os.PathLike[str]) -> None:
    """Write the sample plaintext: the eight-byte chunk repeated 40 times."""
    Path(path).write_bytes(SAMPLE_CHUNK * SAMPLE_REPEAT)


def ecb_encrypt(data: bytes, key: bytes = ZERO_KEY) -> bytes:
    """Encrypt with ECB; only the last block is padded."""
    body, rest = _split_for_padding(bytes(data))
    blocks = [*_blocks(body), pad_block(rest)]
    return b"".join(encrypt_block(block, key) for block in blocks)


def ecb_decrypt(data: bytes, key: bytes = ZERO_KEY) -> bytes:
    """Decrypt ECB ciphertext and remove the padding of the last block."""
    blocks = [decrypt_block(block, key) for block in _blocks(_check_ciphertext(data))]
    return b"".join(blocks[:-1]) + strip_padding(blocks[-1])


def cbc_encrypt(data: bytes, key: bytes = ZERO_KEY, iv: bytes = ZERO_IV) -> bytes:
    """Encrypt with CBC; only the last block is padded."""
    body, rest = _split_for_padding(bytes(data))
    previous = bytes(iv)
    out = []
    for block in [*_blocks(body), pad_block(rest)]:
        previous = encrypt_block(xor_bytes(block, previous), key)
        out.append(previous)
    return b"".join(out)


def cbc_decrypt(data: bytes, key: bytes = ZERO_KEY, iv: bytes = ZERO_IV) -> bytes:
    """Decrypt CBC ciphertext and remove the padding of the last block."""
    previous = bytes(iv)
    plain = []
    for block in _blocks(_check_ciphertext(data)):
        plain.append(xor_bytes(decrypt_block(block, key), previous))
        previous = block
    return b"".join(plain[:-1]) + strip_padding(plain[-1])


def ecb_encrypt_file(input_path, output_path, key: bytes = ZERO_KEY) -> None:
    """Encrypt a file with ECB into another file."""
    Path(output_path).write_bytes(ecb_encrypt(Path(input_path).read_bytes(), key))


def ecb_decrypt_file(input_path, output_path, key: bytes = ZERO_KEY) -> None:
    """Decrypt an ECB-encrypted file into another file."""
    plain = ecb_decrypt(Path(input_path).read_bytes(), key)
    Path(output_path).write_bytes(plain)


def cbc_encrypt_file(input_path, output_path, key: bytes = ZERO_KEY, iv: bytes = ZERO_IV) -> None:
    """Encrypt a file with CBC into another file."""
    Path(output_path).write_bytes(cbc_encrypt(Path(input_path).read_bytes(), key, iv))


def cbc_decrypt_file(input_path, output_path, key: bytes = ZERO_KEY, iv: bytes = ZERO_IV) -> None:
    """Decrypt a CBC-encrypted file into another file."""
    plain = cbc_decrypt(Path(input_path).read_bytes(), key, iv)
    Path(output_path).write_bytes(plain)


def _mmt_record(key: bytes, plaintexts, iv: bytes, ciphertexts) -> bytes:
    return b"".join(
        (
            KEY_LABEL, key,
            PLAINTEXT_LABEL, *plaintexts,
            IV_LABEL, iv,
            CIPHERTEXT_LABEL, *ciphertexts,
        )
    )


def write_mmt_request(path: str | os.PathLike[str]) -> None:
    """Write the two-block CBC multi-block message test vector in raw binary form."""
    Path(path).write_bytes(_mmt_record(MMT_KEY, MMT_PLAINTEXT, MMT_IV, MMT_CIPHERTEXT))


def cbc_mmt(req_path, rsp_path) -> tuple[bytes, bytes]:
    """Read key, two plaintext blocks and IV; write them with the computed ciphertexts."""
    data = Path(req_path).read_bytes()
    layout = (
        len(KEY_LABEL), BLOCK_SIZE,
        len(PLAINTEXT_LABEL), BLOCK_SIZE, BLOCK_SIZE,
        len(IV_LABEL), BLOCK_SIZE,
    )
    if len(data) < sum(layout):
        raise ValueError(f"request file is too short: {len(data)} bytes")
    fields = []
    offset = 0
    for size in layout:
        fields.append(data[offset:offset + size])
        offset += size
    _, key, _, pt1, pt2, _, iv = fields
    ct1 = encrypt_block(xor_bytes(pt1, iv), key)
    ct2 = encrypt_block(xor_bytes(pt2, ct1), key)
    Path(rsp_path).write_bytes(_mmt_record(key, (pt1, pt2), iv, (ct1, ct2)))
    return ct1, ct2


def insert_dummy(src, dst) -> None:
    """Copy a file, replacing its first byte with '1' (or '0' if it already was '1')."""
    data = Path(src).read_bytes()
    first = b"0" if data[:1] == b"1" else b"1"
    Path(dst).write_bytes(first + data[1:])


def main(argv: list[str] | None = None) -> int:
    """Produce the ECB/CBC demonstration files in a directory."""
    parser = argparse.ArgumentParser(description="AES-128 ECB/CBC mode demonstration")
    parser.add_argument("--dir", default=".", help="directory for the generated files")
    args = parser.parse_args(argv)
    base = Path(args.dir)
    base.mkdir(parents=True, exist_ok=True)

    pt_file = base / "pt.bin"
    generate_sample_file(pt_file)

    ecb_enc = base / "ecb_enc.bin"
    ecb_encrypt_file(pt_file, ecb_enc)
    ecb_decrypt_file(ecb_enc, base / "ecb_dec.bin")

    cbc_enc = base / "cbc_enc.bin"
    cbc_encrypt_file(pt_file, cbc_enc)
    cbc_decrypt_file(cbc_enc, base / "cbc_dec.bin")

    request = base / "CBCMMT128.rsp"
    write_mmt_request(request)
    cbc_mmt(request, base / "AESCBC_MMT.rsp")

    ecb_dummy = base / "ecb_enc_dummy.bin"
    insert_dummy(ecb_enc, ecb_dummy)
    ecb_decrypt_file(ecb_dummy, base / "ecb_dummy_dec_.bin")

    cbc_dummy = base / "cbc_enc_dummy.bin"
    insert_dummy(cbc_enc, cbc_dummy)
    cbc_decrypt_file(cbc_dummy, base / "cbc_dummy_dec_.bin")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())