import time
import logging
import aiofiles
from typing import Iterable, List, Optional

from ..error_handler import ErrorHandler

logger = logging.getLogger(__name__)


async def read_lines(path: str, skip_blank: bool = True) -> List[str]:
    """Read a line-oriented file, stripping line endings"""
    lines = []
    async with aiofiles.open(path, mode='r', encoding='utf-8') as f:
        async for line in f:
            line = line.rstrip('\r\n')
            if skip_blank and not line:
                continue
            lines.append(line)
    return lines


class CorpusLoader:
    """Populates a Bloom filter from a corpus of known strings"""

    def __init__(self, bloom_filter, error_handler: Optional[ErrorHandler] = None,
                 metrics=None, skip_blank: bool = True):
        self.bloom_filter = bloom_filter
        self.error_handler = error_handler or ErrorHandler()
        self.metrics = metrics
        self.skip_blank = skip_blank
        self.loaded_sources: List[str] = []

    def load_lines(self, lines: Iterable[str]) -> int:
        """Insert every line from an in-memory source"""
        inserted = 0
        for line in lines:
            line = line.rstrip('\r\n')
            if self.skip_blank and not line:
                continue
            self.bloom_filter.insert(line)
            inserted += 1
        return inserted

    async def load(self, path: str) -> int:
        """
        Load a corpus file into the filter

        The whole file is read before anything is inserted, so an unreadable
        file leaves the filter untouched.

        Args:
            path: Corpus file, one item per line

        Returns:
            Number of items inserted (0 if the file could not be read)
        """
        start_time = time.time()

        try:
            lines = await read_lines(path, self.skip_blank)
        except (OSError, UnicodeDecodeError) as e:
            self.error_handler.record(e, path, "load_corpus")
            return 0

        inserted = self.bloom_filter.insert_all(lines)
        elapsed = time.time() - start_time
        self.loaded_sources.append(path)

        logger.info(f"Loaded {inserted} items from {path} in {elapsed:.2f}s")
        if self.metrics:
            self.metrics.record_corpus_load(path, inserted, elapsed)

        return inserted
