"""Tests for the utils package."""

import logging

import pytest

from trackfinder.exceptions import AllocationError, InvalidArgumentError
from trackfinder.utils.guard import allocation_guard, allocation_scope
from trackfinder.utils.logging import get_logger, setup_logging
from trackfinder.utils.performance import PerformanceMonitor, timing_decorator
from trackfinder.utils.validation import (
    normalize_thread_count,
    validate_audio_path,
    validate_sample_count,
    validate_sample_rate,
)


class TestValidation:
    """Test argument validators."""

    @pytest.mark.parametrize("rate", [8000, 44100.0, "22050", 0.5])
    def test_valid_sample_rates(self, rate):
        assert validate_sample_rate(rate) == float(rate)

    @pytest.mark.parametrize(
        "rate", [0, -1, -44100.0, float("nan"), float("inf"), float("-inf"), None, "fast"]
    )
    def test_invalid_sample_rates(self, rate):
        with pytest.raises(InvalidArgumentError):
            validate_sample_rate(rate)

    def test_sample_count_none_means_all(self):
        assert validate_sample_count(None) is None

    def test_sample_count_positive(self):
        assert validate_sample_count(12) == 12

    @pytest.mark.parametrize("count", [0, -3, 2.5, "abc", [3], float("nan"), float("inf")])
    def test_invalid_sample_counts(self, count):
        with pytest.raises(InvalidArgumentError):
            validate_sample_count(count)

    @pytest.mark.parametrize("threads,expected", [(None, 1), (-2, 1), (0, 1), (1, 1), (4, 4)])
    def test_normalize_thread_count(self, threads, expected):
        assert normalize_thread_count(threads) == expected

    def test_audio_path_missing(self, temp_dir):
        with pytest.raises(InvalidArgumentError, match="not found"):
            validate_audio_path(temp_dir / "missing.wav")

    def test_audio_path_directory_rejected(self, temp_dir):
        with pytest.raises(InvalidArgumentError):
            validate_audio_path(temp_dir)

    def test_audio_path_existing(self, temp_dir):
        audio = temp_dir / "clip.wav"
        audio.write_bytes(b"RIFF")
        assert validate_audio_path(str(audio)) == audio


class TestAllocationGuard:
    """Test MemoryError conversion."""

    def test_scope_converts_memory_error(self):
        with pytest.raises(AllocationError) as exc_info:
            with allocation_scope("test operation"):
                raise MemoryError()
        assert isinstance(exc_info.value.__cause__, MemoryError)
        assert "test operation" in str(exc_info.value)

    def test_scope_passes_other_errors(self):
        with pytest.raises(ValueError):
            with allocation_scope("test operation"):
                raise ValueError("boom")

    def test_decorator_preserves_name_and_result(self):
        @allocation_guard
        def build_buffer(size):
            return [0] * size

        assert build_buffer.__name__ == "build_buffer"
        assert build_buffer(3) == [0, 0, 0]

    def test_decorator_converts_memory_error(self):
        @allocation_guard
        def exhaust():
            raise MemoryError()

        with pytest.raises(AllocationError, match="exhaust"):
            exhaust()


class TestLogging:
    """Test logging setup."""

    def test_setup_logging_configures_package_logger(self):
        logger = setup_logging(level="DEBUG")
        assert logger.name == "trackfinder"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_setup_logging_is_idempotent(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_setup_logging_with_file(self, temp_dir):
        log_file = temp_dir / "logs" / "trackfinder.log"
        logger = setup_logging(log_file=log_file, verbose=True)
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.exists()
        assert "hello" in log_file.read_text()
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    def test_get_logger(self):
        assert get_logger("trackfinder.core").name == "trackfinder.core"


class TestPerformance:
    """Test timing helpers."""

    def test_timing_decorator_returns_result(self):
        @timing_decorator
        def add(a, b):
            return a + b

        assert add(2, 3) == 5

    def test_timing_decorator_reraises(self):
        @timing_decorator
        def fail():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            fail()

    def test_monitor_logs_success(self, caplog):
        caplog.set_level(logging.INFO, logger="trackfinder")
        with PerformanceMonitor("alignment") as monitor:
            pass
        assert monitor.duration >= 0
        assert "Starting alignment" in caplog.text
        assert "alignment completed" in caplog.text

    def test_monitor_logs_failure(self, caplog):
        caplog.set_level(logging.INFO, logger="trackfinder")
        with pytest.raises(KeyError):
            with PerformanceMonitor("alignment"):
                raise KeyError("x")
        assert "alignment failed" in caplog.text


def test_setup_logging_accepts_numeric_level():
    logger = setup_logging(level=logging.WARNING)
    assert logger.level == logging.WARNING
    assert logging.getLogger("numba").level == logging.WARNING
