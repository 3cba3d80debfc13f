import logging

import pytest

from bloomguard.filter import BloomFilter, FilterConfig


@pytest.fixture
def bloom_filter():
    return BloomFilter()


@pytest.fixture
def small_filter():
    return BloomFilter(FilterConfig(bit_array_size=10007))


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
