from typing import Tuple

UINT64_MASK = (1 << 64) - 1

DEFAULT_BASE = 31
DEFAULT_MODULUS = 1_000_000_009


def polynomial_hash(s: str, p: int = DEFAULT_BASE, m: int = DEFAULT_MODULUS) -> int:
    """
    Polynomial rolling hash

    Hash(s) = ((s[0] + 1) + (s[1] + 1)*p + (s[2] + 1)*p^2 + ...) % m

    Args:
        s: Input string
        p: Small prime base
        m: Large prime modulus

    Returns:
        Hash value in [0, m)
    """
    hash_value = 0
    p_pow = 1
    for char in s:
        hash_value = (hash_value + (ord(char) + 1) * p_pow) % m
        p_pow = (p_pow * p) % m
    return hash_value


def djb2(s: str) -> int:
    """DJB2 (hash * 33 + c), wrapping at 64 bits"""
    hash_value = 5381
    for byte in s.encode('utf-8'):
        hash_value = (((hash_value << 5) + hash_value) + byte) & UINT64_MASK
    return hash_value


def sdbm(s: str) -> int:
    """SDBM (hash * 65599 + c), wrapping at 64 bits"""
    hash_value = 0
    for byte in s.encode('utf-8'):
        hash_value = (byte + (hash_value << 6) + (hash_value << 16) - hash_value) & UINT64_MASK
    return hash_value


class HashFamily:
    """Three structurally different string hashes reduced into [0, modulus)"""

    names = ('Polynomial Rolling', 'DJB2', 'SDBM')

    def __init__(self, base: int = DEFAULT_BASE, modulus: int = DEFAULT_MODULUS):
        self.base = base
        self.modulus = modulus

    def __len__(self) -> int:
        return len(self.names)

    def hashes(self, item: str) -> Tuple[int, int, int]:
        """Return the three hash values of item, each in [0, modulus)"""
        return (
            polynomial_hash(item, self.base, self.modulus),
            djb2(item) % self.modulus,
            sdbm(item) % self.modulus
        )

    def indices(self, item: str, size: int) -> Tuple[int, int, int]:
        """Map item to three bit positions in [0, size)"""
        first, second, third = self.hashes(item)
        return first % size, second % size, third % size
