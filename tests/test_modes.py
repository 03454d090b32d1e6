import pytest

from aesmodes import modes
from aesmodes.modes import (
    CiphertextSizeError,
    cbc_decrypt,
    cbc_decrypt_file,
    cbc_encrypt,
    cbc_encrypt_file,
    cbc_mmt,
    ecb_decrypt,
    ecb_decrypt_file,
    ecb_encrypt,
    ecb_encrypt_file,
    file_size,
    generate_sample_file,
    insert_dummy,
    main,
    pad_block,
    pad_file,
    strip_padding,
    write_mmt_request,
)

KEY = bytes(range(16))
IV = bytes(range(16, 32))


def test_pad_block_example_from_format():
    assert pad_block(bytes([1, 2, 3, 4])) == bytes([1, 2, 3, 4, 0x80]) + bytes(11)


def test_pad_block_empty_and_full():
    assert pad_block(b"") == b"\x80" + bytes(15)
    full = bytes(range(16))
    assert pad_block(full) == full


def test_pad_block_too_long():
    with pytest.raises(ValueError):
        pad_block(bytes(17))


@pytest.mark.parametrize("length", range(16))
def test_strip_padding_inverts_pad(length):
    data = bytes([0x41]) * length
    if length == 0:
        assert strip_padding(pad_block(data)) == b""
    else:
        assert strip_padding(pad_block(data)) == data


def test_strip_padding_without_marker():
    assert strip_padding(bytes(16)) == b""


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 32, 100])
def test_ecb_round_trip(length):
    data = bytes((i * 7) & 0xFF for i in range(length)).replace(b"\x80", b"\x81")
    ct = ecb_encrypt(data, KEY)
    assert len(ct) == (length // 16 + 1) * 16
    assert ecb_decrypt(ct, KEY) == data


@pytest.mark.parametrize("length", [0, 5, 16, 31, 48, 320])
def test_cbc_round_trip(length):
    data = bytes((i * 13) & 0xFF for i in range(length)).replace(b"\x80", b"\x7f")
    ct = cbc_encrypt(data, KEY, IV)
    assert len(ct) == (length // 16 + 1) * 16
    assert cbc_decrypt(ct, KEY, IV) == data


def test_ecb_zero_key_zero_block():
    ct = ecb_encrypt(bytes(16))
    assert ct[:16] == bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e")


def test_ecb_repeats_identical_blocks_cbc_does_not():
    data = b"A" * 32
    ecb = ecb_encrypt(data, KEY)
    cbc = cbc_encrypt(data, KEY, IV)
    assert ecb[:16] == ecb[16:32]
    assert cbc[:16] != cbc[16:32]


def test_cbc_with_zero_iv_first_block_matches_ecb():
    data = b"B" * 48
    assert cbc_encrypt(data)[:16] == ecb_encrypt(data)[:16]


@pytest.mark.parametrize("bad", [b"", bytes(15), bytes(17)])
def test_decrypt_rejects_bad_sizes(bad):
    with pytest.raises(CiphertextSizeError):
        ecb_decrypt(bad)
    with pytest.raises(CiphertextSizeError):
        cbc_decrypt(bad)


def test_generate_sample_file(tmp_path):
    path = tmp_path / "pt.bin"
    generate_sample_file(path)
    assert path.read_bytes() == b"Yongbhin" * 40
    assert file_size(path) == 320


def test_file_size_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_size(tmp_path / "missing.bin")


def test_pad_file(tmp_path):
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    src.write_bytes(b"x" * 20)
    pad_file(src, dst)
    assert dst.read_bytes() == b"x" * 20 + b"\x80" + bytes(11)


def test_pad_file_whole_blocks_gains_block(tmp_path):
    src = tmp_path / "src.bin"
    dst = tmp_path / "dst.bin"
    src.write_bytes(b"y" * 32)
    pad_file(src, dst)
    assert dst.read_bytes() == b"y" * 32 + b"\x80" + bytes(15)


def test_file_round_trips(tmp_path):
    pt = tmp_path / "pt.bin"
    generate_sample_file(pt)
    ecb_encrypt_file(pt, tmp_path / "e.bin", KEY)
    ecb_decrypt_file(tmp_path / "e.bin", tmp_path / "e_dec.bin", KEY)
    cbc_encrypt_file(pt, tmp_path / "c.bin", KEY, IV)
    cbc_decrypt_file(tmp_path / "c.bin", tmp_path / "c_dec.bin", KEY, IV)
    assert (tmp_path / "e_dec.bin").read_bytes() == pt.read_bytes()
    assert (tmp_path / "c_dec.bin").read_bytes() == pt.read_bytes()
    assert file_size(tmp_path / "e.bin") == 336


def test_cbc_mmt_matches_reference_vector(tmp_path):
    req = tmp_path / "req.rsp"
    rsp = tmp_path / "rsp.rsp"
    write_mmt_request(req)
    ct1, ct2 = cbc_mmt(req, rsp)
    assert ct1 == bytes.fromhex("c4dc61d9725967a3020104a9738f2386")
    assert ct2 == bytes.fromhex("8527ce839aab1752fd8bdb95a82c4d00")
    assert rsp.read_bytes() == req.read_bytes()


def test_mmt_request_layout(tmp_path):
    req = tmp_path / "req.rsp"
    write_mmt_request(req)
    data = req.read_bytes()
    assert data.startswith(b"KEY = ")
    assert len(data) == 6 + 16 + 12 + 32 + 5 + 16 + 13 + 32


def test_cbc_mmt_short_request(tmp_path):
    req = tmp_path / "req.rsp"
    req.write_bytes(b"KEY = ")
    with pytest.raises(ValueError):
        cbc_mmt(req, tmp_path / "rsp.rsp")


def test_insert_dummy_changes_first_byte(tmp_path):
    src = tmp_path / "a.bin"
    dst = tmp_path / "b.bin"
    src.write_bytes(b"1abc")
    insert_dummy(src, dst)
    assert dst.read_bytes() == b"0abc"
    src.write_bytes(b"zabc")
    insert_dummy(src, dst)
    assert dst.read_bytes() == b"1abc"


def test_ecb_error_stays_in_one_block(tmp_path):
    data = b"Yongbhin" * 40
    ct = ecb_encrypt(data)
    src = tmp_path / "ct.bin"
    dst = tmp_path / "dummy.bin"
    src.write_bytes(ct)
    insert_dummy(src, dst)
    dec = ecb_decrypt(dst.read_bytes())
    assert dec[:16] != data[:16]
    assert dec[16:] == data[16:]


def test_cbc_error_spreads_to_next_block(tmp_path):
    data = b"Yongbhin" * 40
    ct = cbc_encrypt(data)
    src = tmp_path / "ct.bin"
    dst = tmp_path / "dummy.bin"
    src.write_bytes(ct)
    insert_dummy(src, dst)
    dec = cbc_decrypt(dst.read_bytes())
    assert dec[:16] != data[:16]
    assert dec[16:32] != data[16:32]
    assert dec[32:] == data[32:]


def test_main_writes_demo_files(tmp_path):
    assert main(["--dir", str(tmp_path)]) == 0
    sample = (tmp_path / "pt.bin").read_bytes()
    assert (tmp_path / "ecb_dec.bin").read_bytes() == sample
    assert (tmp_path / "cbc_dec.bin").read_bytes() == sample
    assert (tmp_path / "AESCBC_MMT.rsp").read_bytes() == (tmp_path / "CBCMMT128.rsp").read_bytes()
    assert (tmp_path / "cbc_dummy_dec_.bin").read_bytes()[32:] == sample[32:]
    assert modes.file_size(tmp_path / "cbc_enc.bin") == 336