"""Metric output settings"""

import os


METRIC_FORMAT: str = os.environ.get("METRIC_FORMAT", "graphite")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
