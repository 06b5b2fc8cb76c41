"""SM4 block cipher: key schedule and single-block encryption/decryption."""

from __future__ import annotations

import struct
from collections.abc import Sequence

BLOCK_BITS = 128
BLOCK_SIZE = 16
KEY_SIZE = 16
ROUNDS = 32

_MASK32 = 0xFFFFFFFF

FK = (0xA3B1BAC6, 0x56AA3350, 0x677D9197, 0xB27022DC)

CK = (
    0x00070E15, 0x1C232A31, 0x383F464D, 0x545B6269,
    0x70777E85, 0x8C939AA1, 0xA8AFB6BD, 0xC4CBD2D9,
    0xE0E7EEF5, 0xFC030A11, 0x181F262D, 0x343B4249,
    0x50575E65, 0x6C737A81, 0x888F969D, 0xA4ABB2B9,
    0xC0C7CED5, 0xDCE3EAF1, 0xF8FF060D, 0x141B2229,
    0x30373E45, 0x4C535A61, 0x686F767D, 0x848B9299,
    0xA0A7AEB5, 0xBCC3CAD1, 0xD8DFE6ED, 0xF4FB0209,
    0x10171E25, 0x2C333A41, 0x484F565D, 0x646B7279,
)

SBOX = bytes.fromhex(
    "d690e9fecce13db716b614c228fb2c05"
    "2b679a762abe04c3aa44132649860699"
    "9c4250f491ef987a33540b43edcfac62"
    "e4b31ca9c908e89580df94fa758f3fa6"
    "4707a7fcf37317ba83593c19e6854fa8"
    "686b81b27164da8bf8eb0f4b70569d35"
    "1e240e5e6358d1a225227c3b01217887"
    "d40046579fd327524c3602e7a0c4c89e"
    "eabf8ad240c738b5a3f7f2cef96115a1"
    "e0ae5da49b341a55ad933230f58cb1e3"
    "1df6e22e8266ca60c02923ab0d534e6f"
    "d5db3745defd8e2f03ff6a726d6c5b51"
    "8d1baf92bbddbc7f11d95c411f105ad8"
    "0ac13188a5cd7bbd2d74d012b8e5b4b0"
    "8969974a0c96777e65b9f109c56ec684"
    "18f07dec3adc4d2079ee5f3ed7cb3948"
)

_WORDS = struct.Struct(">4I")


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _tau(x: int) -> int:
    """Apply the S-box to each byte of a 32-bit word."""
    return int.from_bytes(x.to_bytes(4, "big").translate(SBOX), "big")


def _t(x: int) -> int:
    """Round transform: S-box followed by the linear map L."""
    b = _tau(x)
    return b ^ _rotl(b, 2) ^ _rotl(b, 10) ^ _rotl(b, 18) ^ _rotl(b, 24)


def _t_prime(x: int) -> int:
    """Key-schedule transform: S-box followed by the linear map L'."""
    b = _tau(x)
    return b ^ _rotl(b, 13) ^ _rotl(b, 23)


def _check_length(data: bytes, size: int, what: str) -> bytes:
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{what} must be {size} bytes, got {len(data)}")
    return data


def make_enc_subkeys(key: bytes) -> tuple[int, ...]:
    """Expand a 16-byte key into the 32 encryption round keys."""
    key = _check_length(key, KEY_SIZE, "key")
    k = [word ^ fk for word, fk in zip(_WORDS.unpack(key), FK)]
    subkeys = []
    for ck in CK:
        rk = k[0] ^ _t_prime(k[1] ^ k[2] ^ k[3] ^ ck)
        subkeys.append(rk)
        k = [k[1], k[2], k[3], rk]
    return tuple(subkeys)


def make_dec_subkeys(key: bytes) -> tuple[int, ...]:
    """Expand a 16-byte key into the 32 decryption round keys."""
    return tuple(reversed(make_enc_subkeys(key)))


def _check_subkeys(subkeys: Sequence[int]) -> tuple[int, ...]:
    subkeys = tuple(subkeys)
    if len(subkeys) != ROUNDS:
        raise ValueError(f"expected {ROUNDS} round keys, got {len(subkeys)}")
    if any(not 0 <= rk <= _MASK32 for rk in subkeys):
        raise ValueError("round keys must be unsigned 32-bit integers")
    return subkeys


def encrypt_block(block: bytes, subkeys: Sequence[int]) -> bytes:
    """Encrypt one 16-byte block with the given round keys."""
    block = _check_length(block, BLOCK_SIZE, "block")
    subkeys = _check_subkeys(subkeys)
    x = list(_WORDS.unpack(block))
    for rk in subkeys:
        x = [x[1], x[2], x[3], x[0] ^ _t(x[1] ^ x[2] ^ x[3] ^ rk)]
    return _WORDS.pack(*reversed(x))


def decrypt_block(block: bytes, subkeys: Sequence[int]) -> bytes:
    """Decrypt one 16-byte block with decryption round keys."""
    return encrypt_block(block, subkeys)