# aesmodes

This package implements the AES-128 block cipher using only the standard library. It contains:

- an encryptor driven by 32-bit lookup tables,
- a decryptor that works on the 16 bytes of the state,
- ECB and CBC modes that pad the last block with `0x80` followed by zero bytes,
- Monte Carlo tests (MCT) for ECB and CBC,
- a two-block CBC multi-block message test (MMT).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `aesmodes.schedule`: `rot_word`, `sub_word`, and the key expansion functions.
  - `key_schedule(key)` expands a 16-byte key into eleven round keys of four 32-bit words each.
  - `key_schedule_bytes(key)` returns the same round keys as 16-byte blocks.
- `aesmodes.aes`: `encrypt_block` and `decrypt_block`, plus the round steps they are built from:
  - `encrypt_round`, `add_round_key`, `inv_sub_bytes`, `inv_shift_rows`, `inv_mix_columns`, `gf_mul`;
  - the state helpers `bytes_to_state`, `state_to_bytes` and `format_state`.
- `aesmodes.hexbytes`: hex text helpers.
  - `is_hex`, `hex_digit`, `hex_byte` and `hex_to_bytes` raise `ValueError` on bad input.
  - `format_bytes` renders bytes as `"LABEL = aa bb ..."`.
  - `xor_bytes` combines two byte strings of equal length.
- `aesmodes.mct`: `ecb_mct`, `cbc_mct`, the `MctRecord` dataclass, `format_record`, and the `main` command.
- `aesmodes.modes`: ECB/CBC over bytes and files, padding helpers, the MMT check, and the `main` command.

Keys, IVs and blocks must be exactly 16 bytes. Any other length raises `ValueError`.

## Single blocks

```python
from aesmodes.aes import encrypt_block, decrypt_block

key = bytes(range(16))
block = b"sixteen byte msg"

ciphertext = encrypt_block(block, key)
assert decrypt_block(ciphertext, key) == block
```

## ECB and CBC

```python
from aesmodes.modes import ecb_encrypt, ecb_decrypt, cbc_encrypt, cbc_decrypt

key = bytes(16)
iv = bytes(16)

data = b"some message"
assert ecb_decrypt(ecb_encrypt(data, key), key) == data
assert cbc_decrypt(cbc_encrypt(data, key, iv), key, iv) == data
```

If you leave out the key or the IV, it defaults to 16 zero bytes.

Padding always applies to the last block:

- A message whose length is a multiple of 16 gains a whole padding block.
- `pad_block` pads 0–16 bytes to one block.
- `strip_padding` keeps the bytes before the last `0x80` byte.

Decryption raises `CiphertextSizeError` (a `ValueError`) if the ciphertext is empty or its length is not a multiple of 16.

File versions of these functions read one path and write another:

- `ecb_encrypt_file`, `ecb_decrypt_file`
- `cbc_encrypt_file`, `cbc_decrypt_file`
- `pad_file`

Other file helpers:

- `file_size` returns the size of a file.
- `generate_sample_file` writes a 320-byte sample plaintext.
- `insert_dummy` copies a file with its first byte replaced by `'1'`, or by `'0'` if the first byte was already `'1'`.

## Monte Carlo tests

```python
from aesmodes.hexbytes import hex_to_bytes
from aesmodes.mct import ECB_KEY, ECB_PLAINTEXT, ecb_mct, format_record

for record in ecb_mct(hex_to_bytes(ECB_KEY), hex_to_bytes(ECB_PLAINTEXT), 3):
    print(format_record(record))
```

Each outer iteration runs 1000 encryptions. Each `MctRecord` holds four values from one outer iteration:

- the key,
- the IV (CBC only; `None` for ECB),
- the first plaintext,
- the final ciphertext.

`cbc_mct(key, iv, plaintext, rounds)` runs the CBC variant.

## Multi-block message test

`write_mmt_request(path)` writes a two-block CBC test vector in a raw binary layout. Each label is followed directly by the raw bytes:

```
KEY = <16 bytes>PLAINTEXT = <32 bytes>IV = <16 bytes>CIPHERTEXT = <32 bytes>
```

`cbc_mmt(req_path, rsp_path)` reads the key, the two plaintext blocks and the IV from such a file. It then:

1. encrypts the two plaintext blocks in CBC mode,
2. writes the same layout with the computed ciphertext to `rsp_path`,
3. returns the two ciphertext blocks.

## Commands

Run the ECB and CBC Monte Carlo tests on the built-in sample vectors and print each outer iteration:

```
aesmodes-mct
aesmodes-mct --mode ecb --rounds 5
```

`--mode` takes `ecb`, `cbc` or `all` (the default). `--rounds` defaults to 3.

The file demonstration writes its files into a directory, which defaults to the current one:

```
aesmodes-modes
aesmodes-modes --dir out
```

It does the following:

1. Writes `pt.bin`.
2. Encrypts and decrypts it in ECB mode (`ecb_enc.bin`, `ecb_dec.bin`) and in CBC mode (`cbc_enc.bin`, `cbc_dec.bin`). Both modes use the all-zero key and IV.
3. Writes the MMT request `CBCMMT128.rsp` and its response `AESCBC_MMT.rsp`.
4. Changes the first byte of each ciphertext and decrypts the result. The files are `ecb_enc_dummy.bin`, `ecb_dummy_dec_.bin`, `cbc_enc_dummy.bin` and `cbc_dummy_dec_.bin`. You can compare them to see how a one-byte change spreads through each mode.

## What this package does not do

- Only 128-bit keys are supported; there is no AES-192 or AES-256.
- Only ECB and CBC modes are provided.
- The MCT and MMT helpers do not read or write the text-based request/response files used by official validation suites. They work on the sample vectors and the raw binary layout described above.
- The padding is removed without being checked, so a damaged ciphertext decrypts without raising an error.