"""
Corpus loading and candidate screening
"""

from .corpus_loader import CorpusLoader
from .screening_report import ScreeningReport
from .screener import Screener

__all__ = [
    'CorpusLoader',
    'ScreeningReport',
    'Screener'
]
