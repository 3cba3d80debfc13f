import threading
from typing import Iterable, Optional

from .bloom_filter import BloomFilter
from .filter_config import FilterConfig


class SynchronizedBloomFilter:
    """Bloom filter guarded by one lock held for each whole insert and query"""

    def __init__(self, bloom_filter: Optional[BloomFilter] = None, config: Optional[FilterConfig] = None):
        self.bloom_filter = bloom_filter or BloomFilter(config)
        self._lock = threading.Lock()

    def insert(self, item: str):
        with self._lock:
            self.bloom_filter.insert(item)

    def insert_all(self, items: Iterable[str]) -> int:
        inserted = 0
        for item in items:
            self.insert(item)
            inserted += 1
        return inserted

    def query(self, item: str) -> bool:
        with self._lock:
            return self.bloom_filter.query(item)

    def __contains__(self, item: str) -> bool:
        return self.query(item)

    def size(self) -> int:
        return self.bloom_filter.size()

    @property
    def item_count(self) -> int:
        with self._lock:
            return self.bloom_filter.item_count
