import random

import pytest

from sm4kit.cipher import (
    decrypt_block,
    encrypt_block,
    make_dec_subkeys,
    make_enc_subkeys,
)

VECTOR_KEY = bytes.fromhex("0123456789abcdeffedcba9876543210")
VECTOR_PLAIN = bytes.fromhex("0123456789abcdeffedcba9876543210")
VECTOR_CIPHER = bytes.fromhex("681edf34d206965e86b3e94f536e4246")

VECTOR_ROUND_KEYS = (
    0xF12186F9, 0x41662B61, 0x5A6AB19A, 0x7BA92077,
    0x367360F4, 0x776A0C61, 0xB6BB89B3, 0x24763151,
    0xA520307C, 0xB7584DBD, 0xC30753ED, 0x7EE55B57,
    0x6988608C, 0x30D895B7, 0x44BA14AF, 0x104495A1,
    0xD120B428, 0x73B55FA3, 0xCC874966, 0x92244439,
    0xE89E641F, 0x98CA015A, 0xC7159060, 0x99E1FD2E,
    0xB79BD80C, 0x1D2115B0, 0x0E228AEB, 0xF1780C81,
    0x428D3654, 0x62293496, 0x01CF72E5, 0x9124A012,
)


def test_encryption_subkeys_match_vector():
    assert make_enc_subkeys(VECTOR_KEY) == VECTOR_ROUND_KEYS


def test_decryption_subkeys_are_reversed():
    assert make_dec_subkeys(VECTOR_KEY) == tuple(reversed(VECTOR_ROUND_KEYS))


def test_encrypt_vector():
    subkeys = make_enc_subkeys(VECTOR_KEY)
    assert encrypt_block(VECTOR_PLAIN, subkeys) == VECTOR_CIPHER


def test_decrypt_vector():
    subkeys = make_dec_subkeys(VECTOR_KEY)
    assert decrypt_block(VECTOR_CIPHER, subkeys) == VECTOR_PLAIN


def test_accepts_bytearray_and_memoryview():
    subkeys = make_enc_subkeys(bytearray(VECTOR_KEY))
    assert encrypt_block(memoryview(VECTOR_PLAIN), subkeys) == VECTOR_CIPHER


@pytest.mark.parametrize("seed", range(8))
def test_random_round_trip(seed):
    rng = random.Random(seed)
    key_material = rng.randbytes(16)
    block = rng.randbytes(16)
    ciphertext = encrypt_block(block, make_enc_subkeys(key_material))
    assert len(ciphertext) == 16
    assert decrypt_block(ciphertext, make_dec_subkeys(key_material)) == block


def test_different_keys_give_different_ciphertexts():
    other = bytes(16)
    ciphertext = encrypt_block(VECTOR_PLAIN, make_enc_subkeys(other))
    assert len(ciphertext) == 16
    assert decrypt_block(ciphertext, make_dec_subkeys(other)) == VECTOR_PLAIN
    assert ciphertext != VECTOR_CIPHER
    assert decrypt_block(ciphertext, make_dec_subkeys(VECTOR_KEY)) != VECTOR_PLAIN


@pytest.mark.parametrize("length", [0, 15, 17, 32])
def test_bad_key_length(length):
    with pytest.raises(ValueError):
        make_enc_subkeys(bytes(length))


@pytest.mark.parametrize("length", [0, 8, 15, 17])
def test_bad_block_length(length):
    subkeys = make_enc_subkeys(VECTOR_KEY)
    with pytest.raises(ValueError):
        encrypt_block(bytes(length), subkeys)


def test_wrong_number_of_subkeys():
    subkeys = make_enc_subkeys(VECTOR_KEY)[:31]
    with pytest.raises(ValueError):
        encrypt_block(VECTOR_PLAIN, subkeys)


def test_subkey_out_of_range():
    subkeys = list(make_enc_subkeys(VECTOR_KEY))
    subkeys[0] = 1 << 32
    with pytest.raises(ValueError):
        decrypt_block(VECTOR_CIPHER, subkeys)