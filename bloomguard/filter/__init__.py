"""
Membership filter: hash family, packed bit array and the Bloom filter itself
"""

from .hash_family import HashFamily, polynomial_hash, djb2, sdbm
from .bit_array import BitArray
from .filter_config import FilterConfig
from .bloom_filter import BloomFilter
from .synchronized_filter import SynchronizedBloomFilter
from .filter_statistics import FilterStatistics

__all__ = [
    'HashFamily',
    'polynomial_hash',
    'djb2',
    'sdbm',
    'BitArray',
    'FilterConfig',
    'BloomFilter',
    'SynchronizedBloomFilter',
    'FilterStatistics'
]
