import time
import logging
from typing import Iterable, Optional

from ..error_handler import ErrorHandler
from .corpus_loader import read_lines
from .screening_report import ScreeningReport

logger = logging.getLogger(__name__)

POSITIVE_VERDICT = "possibly malicious"
NEGATIVE_VERDICT = "not malicious"


class Screener:
    """Checks candidate strings against a populated Bloom filter"""

    def __init__(self, bloom_filter, error_handler: Optional[ErrorHandler] = None, metrics=None):
        self.bloom_filter = bloom_filter
        self.error_handler = error_handler or ErrorHandler()
        self.metrics = metrics

    def check(self, item: str) -> bool:
        return self.bloom_filter.query(item)

    def verdict(self, item: str) -> str:
        return POSITIVE_VERDICT if self.check(item) else NEGATIVE_VERDICT

    def screen_lines(self, lines: Iterable[str], source: str = "<lines>") -> ScreeningReport:
        """Query every line and tally the results"""
        report = ScreeningReport(source=source)
        for line in lines:
            line = line.rstrip('\r\n')
            result = self.check(line)
            logger.debug(f"Checking {line} : {POSITIVE_VERDICT if result else NEGATIVE_VERDICT}")
            report.record(line, result)
        return report

    async def screen_file(self, path: str) -> ScreeningReport:
        """
        Screen every line of a file

        Returns:
            ScreeningReport; empty with error set if the file could not be read
        """
        start_time = time.time()

        try:
            lines = await read_lines(path, skip_blank=False)
        except (OSError, UnicodeDecodeError) as e:
            error_info = self.error_handler.record(e, path, "screen_file")
            return ScreeningReport(source=path, error=f"{error_info.error_type.value}: {error_info.message}")

        report = self.screen_lines(lines, source=path)
        elapsed = time.time() - start_time

        logger.info(f"Screened {report.total} items from {path}: "
                    f"{report.positives} positives, {report.negatives} negatives")
        if self.metrics:
            self.metrics.record_screening(report, elapsed)

        return report
