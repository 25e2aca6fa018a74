"""Utility modules."""

from .logging import setup_logging, get_logger
from .validation import (
    validate_sample_rate,
    validate_sample_count,
    normalize_thread_count,
    validate_audio_path,
)
from .guard import allocation_guard, allocation_scope
from .performance import timing_decorator, PerformanceMonitor

__all__ = [
    "setup_logging",
    "get_logger",
    "validate_sample_rate",
    "validate_sample_count",
    "normalize_thread_count",
    "validate_audio_path",
    "allocation_guard",
    "allocation_scope",
    "timing_decorator",
    "PerformanceMonitor",
]
