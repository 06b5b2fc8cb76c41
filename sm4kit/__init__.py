"""SM4 block cipher (key schedule, single-block encrypt/decrypt) and a throughput benchmark helper."""

__version__ = "0.1.0"
__all__ = ["cipher", "benchmark"]