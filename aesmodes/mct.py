"""Monte Carlo tests for AES-128 in ECB and CBC modes."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from aesmodes.aes import encrypt_block
from aesmodes.hexbytes import format_bytes, hex_to_bytes, xor_bytes

INNER_ITERATIONS = 1000
DEFAULT_ROUNDS = 3

ECB_KEY = "8d2e60365f17c7df1040d7501b4a7b5a"
ECB_PLAINTEXT = "59b5088e6dadc3ad5f27a460872d5929"

CBC_KEY = "9dc2c84a37850c11699818605f47958c"
CBC_IV = "256953b2feab2a04ae0180d8335bbed6"
CBC_PLAINTEXT = "2e586692e647f5028ec6fa47a55a2aab"


@dataclass(frozen=True)
class MctRecord:
    """One outer iteration of a Monte Carlo test."""

    key: bytes
    plaintext: bytes
    ciphertext: bytes
    iv: bytes | None = None


def _check16(value: bytes, what: str) -> bytes:
    value = bytes(value)
    if len(value) != 16:
        raise ValueError(f"{what} must be 16 bytes, got {len(value)}")
    return value


def ecb_mct(key: bytes, plaintext: bytes, rounds: int = DEFAULT_ROUNDS) -> list[MctRecord]:
    """Run the ECB Monte Carlo test and return one record per outer round."""
    key = _check16(key, "key")
    pt = _check16(plaintext, "plaintext")
    records = []
    for _ in range(rounds):
        start_pt = pt
        for _ in range(INNER_ITERATIONS):
            pt = encrypt_block(pt, key)
        ct = pt
        records.append(MctRecord(key=key, plaintext=start_pt, ciphertext=ct))
        key = xor_bytes(key, ct)
    return records


def cbc_mct(
    key: bytes, iv: bytes, plaintext: bytes, rounds: int = DEFAULT_ROUNDS
) -> list[MctRecord]:
    """Run the CBC Monte Carlo test and return one record per outer round."""
    key = _check16(key, "key")
    iv = _check16(iv, "iv")
    pt = _check16(plaintext, "plaintext")
    records = []
    for _ in range(rounds):
        start_pt = pt
        ct = encrypt_block(xor_bytes(pt, iv), key)
        pt = iv
        prev_ct = ct
        for _ in range(1, INNER_ITERATIONS):
            prev_ct = ct
            ct = encrypt_block(pt, key)
            pt = prev_ct
        records.append(MctRecord(key=key, iv=iv, plaintext=start_pt, ciphertext=ct))
        key = xor_bytes(key, ct)
        iv = ct
        pt = prev_ct
    return records


def format_record(record: MctRecord) -> str:
    """Render a record as labelled hex lines."""
    lines = [format_bytes(record.key, "KEY")]
    if record.iv is not None:
        lines.append(format_bytes(record.iv, "IV "))
    lines.append(format_bytes(record.plaintext, "PT "))
    lines.append(format_bytes(record.ciphertext, "CT "))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the ECB and/or CBC Monte Carlo tests and print the results."""
    parser = argparse.ArgumentParser(description="AES-128 Monte Carlo tests")
    parser.add_argument("--mode", choices=("ecb", "cbc", "all"), default="all")
    parser.add_argument("--rounds", type=int, default=DEFAULT_ROUNDS)
    args = parser.parse_args(argv)

    if args.mode in ("ecb", "all"):
        print("MCT-ECB Test")
        for record in ecb_mct(hex_to_bytes(ECB_KEY), hex_to_bytes(ECB_PLAINTEXT), args.rounds):
            print(format_record(record))
            print()
    if args.mode in ("cbc", "all"):
        print("MCT-CBC Test")
        records = cbc_mct(
            hex_to_bytes(CBC_KEY), hex_to_bytes(CBC_IV), hex_to_bytes(CBC_PLAINTEXT), args.rounds
        )
        for record in records:
            print(format_record(record))
            print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())