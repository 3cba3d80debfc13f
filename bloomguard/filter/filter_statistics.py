import math
from dataclasses import dataclass, asdict
from typing import Dict, Any


def theoretical_false_positive_rate(bit_array_size: int, item_count: int, hash_count: int = 3) -> float:
    """(1 - e^(-k*n/m))^k for m bits, n items and k hash functions"""
    if item_count <= 0:
        return 0.0
    return (1 - math.exp(-hash_count * item_count / bit_array_size)) ** hash_count


def optimal_hash_count(bit_array_size: int, capacity: int) -> int:
    """k = (m / n) * ln 2, at least 1"""
    if capacity <= 0:
        return 1
    return max(1, round(bit_array_size / capacity * math.log(2)))


@dataclass
class FilterStatistics:
    """Point-in-time diagnostics for a Bloom filter"""
    bit_array_size: int = 0
    hash_count: int = 0
    items_inserted: int = 0
    bits_set: int = 0
    fill_ratio: float = 0.0
    expected_false_positive_rate: float = 0.0
    estimated_false_positive_rate: float = 0.0
    memory_bytes: int = 0

    @classmethod
    def from_filter(cls, bloom_filter) -> 'FilterStatistics':
        bloom_filter = getattr(bloom_filter, 'bloom_filter', bloom_filter)
        bits = bloom_filter.bits
        bits_set = bits.count()
        fill_ratio = bits_set / bits.size
        hash_count = bloom_filter.hash_count

        return cls(
            bit_array_size=bits.size,
            hash_count=hash_count,
            items_inserted=bloom_filter.item_count,
            bits_set=bits_set,
            fill_ratio=fill_ratio,
            expected_false_positive_rate=theoretical_false_positive_rate(
                bits.size, bloom_filter.item_count, hash_count
            ),
            # Observed fill ratio^k, accounts for duplicate inserts
            estimated_false_positive_rate=fill_ratio ** hash_count,
            memory_bytes=bits.byte_size
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
