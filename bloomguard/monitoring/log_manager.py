import json
import logging
from pathlib import Path
from datetime import datetime
from typing import Dict, Any, Optional


def _close_handlers(logger: logging.Logger):
    """Detach and close every handler of logger"""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


class LogManager:
    """Logging setup: console, daily log files and a JSON-lines performance log"""

    def __init__(self, log_dir: Optional[str] = "bloomguard_data/logs", log_level: str = "INFO"):
        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.setup_logging(log_level)

    def setup_logging(self, log_level: str):
        """Set up logging with console and (optionally) file handlers"""
        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
        )
        simple_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s'
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, log_level.upper()))
        _close_handlers(root_logger)

        # Console only shows warnings so the menu output stays readable
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(simple_formatter)
        root_logger.addHandler(console_handler)

        self.perf_logger = logging.getLogger('performance')
        self.perf_logger.setLevel(logging.INFO)
        self.perf_logger.propagate = False
        _close_handlers(self.perf_logger)

        if not self.log_dir:
            self.perf_logger.addHandler(logging.NullHandler())
            return

        all_logs_file = self.log_dir / f"bloomguard_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(all_logs_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        error_file = self.log_dir / f"errors_{datetime.now().strftime('%Y%m%d')}.log"
        error_handler = logging.FileHandler(error_file)
        error_handler.setLevel(logging.WARNING)
        error_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(error_handler)

        perf_file = self.log_dir / f"performance_{datetime.now().strftime('%Y%m%d')}.log"
        self.perf_logger.addHandler(logging.FileHandler(perf_file))

    def close(self):
        """Close all handlers installed by this manager"""
        _close_handlers(logging.getLogger())
        _close_handlers(self.perf_logger)

    def log_performance_event(self, event_type: str, **kwargs):
        """Log performance-related events"""
        event_data = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            **kwargs
        }
        self.perf_logger.info(json.dumps(event_data, default=str))

    def export_metrics_json(self, metrics_data: Dict[str, Any], filename: str = None) -> Optional[Path]:
        """Export metrics to JSON file"""
        if not self.log_dir:
            return None

        if filename is None:
            filename = f"metrics_export_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"

        export_path = self.log_dir / filename
        with open(export_path, 'w') as f:
            json.dump(metrics_data, f, indent=2, default=str)

        logging.info(f"Metrics exported to {export_path}")
        return export_path
