from dataclasses import dataclass


@dataclass
class ProcessMetrics:
    """Resource usage of the current process"""
    cpu_percent: float = 0.0
    memory_rss_mb: float = 0.0
    memory_percent: float = 0.0
    open_files: int = 0
