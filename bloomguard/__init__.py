"""
Bloomguard - Bloom filter screening of candidate strings against a blocklist
"""

from .filter import BloomFilter, FilterConfig, SynchronizedBloomFilter
from .corpus import CorpusLoader, Screener, ScreeningReport
from .error_handler import ConfigurationError, ErrorHandler

__all__ = [
    'BloomFilter',
    'FilterConfig',
    'SynchronizedBloomFilter',
    'CorpusLoader',
    'Screener',
    'ScreeningReport',
    'ConfigurationError',
    'ErrorHandler'
]
