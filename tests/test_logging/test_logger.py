"""Tests for SamplingLogger and DrawRecord."""

from __future__ import annotations

import json
import logging

import pytest

from unbiased_randint.config import RandintConfig
from unbiased_randint.logging.logger import SamplingLogger
from unbiased_randint.logging.types import DrawRecord


def _make_record(**overrides: object) -> DrawRecord:
    """Create a DrawRecord with sensible defaults, overridable."""
    defaults: dict[str, object] = {
        "timestamp_ns": 1_000_000_000,
        "minimum": 1,
        "maximum": 6,
        "bytes_per_attempt": 1,
        "attempts": 1,
        "value": 4,
        "entropy_source": "system",
        "total_ms": 0.5,
    }
    defaults.update(overrides)
    return DrawRecord(**defaults)  # type: ignore[arg-type]


class TestDrawRecord:
    def test_frozen(self) -> None:
        record = _make_record()
        with pytest.raises(AttributeError):
            record.value = 2  # type: ignore[misc]

    def test_slots(self) -> None:
        assert hasattr(_make_record(), "__slots__")

    def test_rejections(self) -> None:
        assert _make_record(attempts=1).rejections == 0
        assert _make_record(attempts=4).rejections == 3


class TestLogLevels:
    def test_none_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        sampling_logger = SamplingLogger(RandintConfig(log_level="none"))
        with caplog.at_level(logging.DEBUG, logger="unbiased_randint"):
            sampling_logger.log_draw(_make_record())
        assert caplog.records == []

    def test_summary_one_line(self, caplog: pytest.LogCaptureFixture) -> None:
        sampling_logger = SamplingLogger(RandintConfig(log_level="summary"))
        with caplog.at_level(logging.INFO, logger="unbiased_randint"):
            sampling_logger.log_draw(_make_record(attempts=2, value=3))
        assert len(caplog.records) == 1
        message = caplog.records[0].getMessage()
        assert "range=[1, 6]" in message
        assert "value=3" in message
        assert "attempts=2" in message
        assert "source=system" in message
        assert "[FALLBACK]" not in message

    def test_summary_flags_fallback(self, caplog: pytest.LogCaptureFixture) -> None:
        sampling_logger = SamplingLogger(RandintConfig(log_level="summary"))
        with caplog.at_level(logging.INFO, logger="unbiased_randint"):
            sampling_logger.log_draw(
                _make_record(attempts=2, entropy_source="mock_uniform", fallback_attempts=1)
            )
        assert "source=mock_uniform [FALLBACK]" in caplog.records[0].getMessage()

    def test_full_dumps_json(self, caplog: pytest.LogCaptureFixture) -> None:
        sampling_logger = SamplingLogger(RandintConfig(log_level="full"))
        with caplog.at_level(logging.INFO, logger="unbiased_randint"):
            sampling_logger.log_draw(_make_record(maximum=2**80))
        message = caplog.records[0].getMessage()
        payload = json.loads(message.split("draw_record: ", 1)[1])
        assert payload["maximum"] == 2**80
        assert payload["entropy_source"] == "system"
        assert payload["fallback_attempts"] == 0


class TestDiagnosticMode:
    def test_records_not_kept_by_default(self) -> None:
        sampling_logger = SamplingLogger(RandintConfig())
        sampling_logger.log_draw(_make_record())
        assert sampling_logger.get_diagnostic_data() == []
        assert sampling_logger.get_summary_stats() == {}

    def test_records_kept(self, diagnostic_config: RandintConfig) -> None:
        sampling_logger = SamplingLogger(diagnostic_config)
        record = _make_record()
        sampling_logger.log_draw(record)
        assert sampling_logger.get_diagnostic_data() == [record]

    def test_returned_list_is_a_copy(self, diagnostic_config: RandintConfig) -> None:
        sampling_logger = SamplingLogger(diagnostic_config)
        sampling_logger.log_draw(_make_record())
        sampling_logger.get_diagnostic_data().clear()
        assert len(sampling_logger.get_diagnostic_data()) == 1

    def test_summary_stats(self) -> None:
        sampling_logger = SamplingLogger(RandintConfig(diagnostic_mode=True))
        sampling_logger.log_draw(_make_record(attempts=1, total_ms=1.0))
        sampling_logger.log_draw(_make_record(attempts=3, total_ms=3.0))

        stats = sampling_logger.get_summary_stats()
        assert stats["total_draws"] == 2
        assert stats["total_attempts"] == 4
        assert stats["mean_attempts"] == pytest.approx(2.0)
        assert stats["rejection_rate"] == pytest.approx(0.5)
        assert stats["max_attempts"] == 3
        assert stats["mean_total_ms"] == pytest.approx(2.0)
        assert stats["max_total_ms"] == pytest.approx(3.0)
        assert stats["fallback_draws"] == 0
        assert stats["fallback_rate"] == 0.0

    def test_fallback_rate(self, diagnostic_config: RandintConfig) -> None:
        sampling_logger = SamplingLogger(diagnostic_config)
        sampling_logger.log_draw(_make_record())
        sampling_logger.log_draw(_make_record(attempts=3, fallback_attempts=2))
        sampling_logger.log_draw(_make_record(attempts=2, fallback_attempts=1))
        sampling_logger.log_draw(_make_record())

        stats = sampling_logger.get_summary_stats()
        assert stats["fallback_draws"] == 2
        assert stats["fallback_rate"] == pytest.approx(0.5)
