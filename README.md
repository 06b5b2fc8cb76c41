# sm4kit

A pure-Python SM4 block cipher (128-bit block, 128-bit key, 32 rounds)
and a small helper for measuring the throughput of block-cipher
operations. No third-party dependencies.

## Installation

```
pip install .
```

## The cipher: `sm4kit.cipher`

| Name | What it does |
| --- | --- |
| `make_enc_subkeys(key)` | Expands a 16-byte key into a tuple of 32 round keys (unsigned 32-bit integers). |
| `make_dec_subkeys(key)` | The same round keys in reverse order. |
| `encrypt_block(block, subkeys)` | Encrypts one 16-byte block; returns 16 bytes. |
| `decrypt_block(block, subkeys)` | Runs the same routine; pass it the decryption round keys. |

The module also exposes the constants `BLOCK_BITS` (128), `BLOCK_SIZE`
(16), `KEY_SIZE` (16), `ROUNDS` (32), and the tables `SBOX`, `FK` and `CK`.

A key or block of the wrong length, a round-key sequence that is not
exactly 32 entries long, or a round key outside the unsigned 32-bit
range raises `ValueError`.

```python
from sm4kit.cipher import (
    make_enc_subkeys,
    make_dec_subkeys,
    encrypt_block,
    decrypt_block,
)

cipher_key = bytes(16)          # all-zero demonstration key
plaintext = bytes(range(16))

ciphertext = encrypt_block(plaintext, make_enc_subkeys(cipher_key))
assert decrypt_block(ciphertext, make_dec_subkeys(cipher_key)) == plaintext
```

## Measuring throughput: `sm4kit.benchmark`

`bench(label, benches, rounds, setup, func, block_bits, stream=None)`
makes `benches` timed passes. Each pass calls `setup` once, untimed,
unless `setup` is `None`. It then times `rounds` calls of `func`. The
function writes a report to `stream`, which defaults to standard output,
and returns a `ThroughputReport`. Passing fewer than two benches raises
`ValueError`.

```python
from sm4kit.benchmark import bench
from sm4kit.cipher import make_enc_subkeys, encrypt_block

round_keys = make_enc_subkeys(bytes(16))
block = bytes(16)

report = bench(
    "SM4 encryption",
    benches=10,
    rounds=1000,
    setup=None,
    func=lambda: encrypt_block(block, round_keys),
    block_bits=128,
)
print(report.rate())
```

The printed output looks like:

```
BLOCK_CIPHER_THROUGHPUT: SM4 encryption
Execute time: 0.123456 s
Throughpt: 1.234567 Mbps

```

`summarize(times_ns, rounds, block_bits)` builds a report from timings you
have already collected, in nanoseconds. It needs at least two timings and
raises `ValueError` otherwise.

A `ThroughputReport` is a frozen dataclass. It has the fields `times_ns`,
`rounds`, `block_bits` and `label`, and these properties:

- `benches`: the number of timings.
- `total_ns`: the sum of the timings.
- `bits`: benches × rounds × block_bits.
- `seconds`: the total time in seconds.

It has two methods:

- `rate()` returns `(value, unit)`. The unit is the first of `bps`, `Kbps`,
  `Mbps` and `Gbps` (steps of 1024) that keeps the value below 1000. If
  none does, the unit is `Gbps`.
- `render()` returns the "Execute time" and "Throughpt" lines.

## What this package does not do

It works on single 16-byte blocks only. It has no block-cipher modes
(ECB, CBC, CTR, …), no padding and no handling of messages of arbitrary
length. It has no command-line tool. It is written for clarity, not
speed, and makes no claim of resistance to timing side channels.

## Running the tests

```
pip install .[test]
pytest
```