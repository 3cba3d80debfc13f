import time
import psutil
import logging
import threading
from datetime import datetime
from dataclasses import asdict
from typing import Dict, Any, List
from collections import deque

from ..filter.filter_statistics import FilterStatistics
from .process_metrics import ProcessMetrics


class MetricsCollector:
    """Collects filter diagnostics, process resource usage and load/screen timings"""

    def __init__(self, bloom_filter):
        self.bloom_filter = bloom_filter
        self.start_time = time.time()

        self.process_metrics = ProcessMetrics()
        self.corpus_loads: List[Dict[str, Any]] = []
        self.screenings: deque = deque(maxlen=100)

        self.totals = {
            'items_loaded': 0,
            'items_screened': 0,
            'positives': 0,
            'negatives': 0
        }

        self._lock = threading.Lock()

    def record_corpus_load(self, source: str, inserted: int, elapsed: float):
        """Record a completed corpus load"""
        with self._lock:
            self.totals['items_loaded'] += inserted
            self.corpus_loads.append({
                'source': source,
                'inserted': inserted,
                'elapsed': elapsed,
                'items_per_second': inserted / elapsed if elapsed > 0 else 0.0,
                'timestamp': datetime.now().isoformat()
            })

    def record_screening(self, report, elapsed: float):
        """Record a completed screening run"""
        with self._lock:
            self.totals['items_screened'] += report.total
            self.totals['positives'] += report.positives
            self.totals['negatives'] += report.negatives
            self.screenings.append({
                'source': report.source,
                'total': report.total,
                'positives': report.positives,
                'elapsed': elapsed,
                'timestamp': datetime.now().isoformat()
            })

    def collect_process_metrics(self):
        """Collect current resource usage of this process"""
        try:
            process = psutil.Process()
            self.process_metrics.cpu_percent = process.cpu_percent(interval=None)
            self.process_metrics.memory_rss_mb = process.memory_info().rss / (1024 * 1024)
            self.process_metrics.memory_percent = process.memory_percent()
            try:
                self.process_metrics.open_files = process.num_fds() if hasattr(process, 'num_fds') else len(process.open_files())
            except psutil.AccessDenied:
                self.process_metrics.open_files = 0

        except (psutil.NoSuchProcess, psutil.AccessDenied) as e:
            logging.warning(f"Failed to collect process metrics: {e}")

    def get_current_snapshot(self) -> Dict[str, Any]:
        """Get current metrics snapshot"""
        self.collect_process_metrics()
        filter_stats = FilterStatistics.from_filter(self.bloom_filter)

        with self._lock:
            return {
                'timestamp': datetime.now().isoformat(),
                'uptime': time.time() - self.start_time,
                'filter': filter_stats.to_dict(),
                'process': asdict(self.process_metrics),
                'totals': dict(self.totals),
                'corpus_loads': list(self.corpus_loads),
                'recent_screenings': list(self.screenings)
            }
