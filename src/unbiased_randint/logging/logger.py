"""Diagnostic logger for per-draw sampling events.

Uses the standard ``logging`` module with the ``"unbiased_randint"`` logger.
Supports three verbosity levels and an in-memory diagnostic mode for
post-hoc analysis of rejection rates.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from unbiased_randint.config import RandintConfig
    from unbiased_randint.logging.types import DrawRecord

logger = logging.getLogger("unbiased_randint")


class SamplingLogger:
    """Per-draw diagnostic logger.

    Log levels:
        ``"none"``: No output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per draw with the range, value and attempts.

        ``"full"``: JSON dump of every record field.
    """

    def __init__(self, config: RandintConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[DrawRecord] = []

    def log_draw(self, record: DrawRecord) -> None:
        """Log a single completed draw."""
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "summary":
            logger.info(
                "range=[%d, %d] value=%d attempts=%d bytes=%d source=%s%s total=%.3fms",
                record.minimum,
                record.maximum,
                record.value,
                record.attempts,
                record.bytes_per_attempt,
                record.entropy_source,
                " [FALLBACK]" if record.fallback_attempts else "",
                record.total_ms,
            )
        elif self._log_level == "full":
            logger.info("draw_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[DrawRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Aggregate statistics over the stored records.

        Returns:
            Dictionary with draw count, attempt and timing figures, or an
            empty dict if no records are stored.
        """
        if not self._records:
            return {}

        n = len(self._records)
        attempts = sum(r.attempts for r in self._records)
        rejections = sum(r.rejections for r in self._records)
        total_times = [r.total_ms for r in self._records]
        fallback_draws = sum(1 for r in self._records if r.fallback_attempts)
        return {
            "total_draws": n,
            "total_attempts": attempts,
            "mean_attempts": attempts / n,
            "rejection_rate": rejections / attempts,
            "max_attempts": max(r.attempts for r in self._records),
            "mean_total_ms": sum(total_times) / n,
            "max_total_ms": max(total_times),
            "fallback_draws": fallback_draws,
            "fallback_rate": fallback_draws / n,
        }
