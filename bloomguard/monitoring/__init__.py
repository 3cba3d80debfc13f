"""
Logging and metrics modules
"""

from .log_manager import LogManager
from .metrics_collector import MetricsCollector
from .process_metrics import ProcessMetrics

__all__ = [
    'LogManager',
    'MetricsCollector',
    'ProcessMetrics'
]
