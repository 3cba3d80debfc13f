import logging
from typing import Iterable, Optional

from .bit_array import BitArray
from .filter_config import FilterConfig
from .hash_family import HashFamily

logger = logging.getLogger(__name__)


class BloomFilter:
    """Probabilistic set membership: false positives possible, false negatives never"""

    def __init__(self, config: Optional[FilterConfig] = None):
        """
        Initialize Bloom filter

        Args:
            config: Bit array size and hash parameters (defaults to FilterConfig())
        """
        self.config = config or FilterConfig()
        self.hash_family = HashFamily(self.config.polynomial_base, self.config.modulus)
        self.bits = BitArray(self.config.bit_array_size)
        self.item_count = 0

        logger.debug(f"Created Bloom filter with {self.bits.size} bits and {len(self.hash_family)} hash functions")

    @staticmethod
    def _check_item(item) -> str:
        if not isinstance(item, str):
            raise TypeError(f"Bloom filter items must be str, got {type(item).__name__}")
        return item

    def insert(self, item: str):
        """Add item to bloom filter"""
        for index in self.hash_family.indices(self._check_item(item), self.bits.size):
            self.bits.set(index)
        self.item_count += 1

    def insert_all(self, items: Iterable[str]) -> int:
        """Add every item, returning how many were inserted"""
        inserted = 0
        for item in items:
            self.insert(item)
            inserted += 1
        return inserted

    def query(self, item: str) -> bool:
        """
        Check if item might be in the set

        Returns:
            False if the item was definitely never inserted,
            True if it probably was (false positives possible)
        """
        for index in self.hash_family.indices(self._check_item(item), self.bits.size):
            if not self.bits.test(index):
                return False
        return True

    def __contains__(self, item: str) -> bool:
        return self.query(item)

    def size(self) -> int:
        """Bit array capacity"""
        return self.bits.size

    @property
    def hash_count(self) -> int:
        return len(self.hash_family)

    @property
    def is_empty(self) -> bool:
        return self.item_count == 0
