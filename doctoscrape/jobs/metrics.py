"""Counters for a search run."""
import time
import logging
from collections import defaultdict
from typing import Dict

logger = logging.getLogger(__name__)


class Metrics:
    """Track what a run fetched and reported."""

    def __init__(self):
        self.start_time = time.time()
        self.counters: Dict[str, int] = defaultdict(int)

    def increment(self, key: str, amount: int = 1) -> None:
        """Increment a counter."""
        self.counters[key] += amount

    def get_summary(self) -> Dict:
        """Get summary statistics."""
        return {
            "pages": self.counters.get("pages", 0),
            "centers": self.counters.get("centers", 0),
            "reported": self.counters.get("reported", 0),
            "excluded": self.counters.get("excluded", 0),
            "no_slots": self.counters.get("no_slots", 0),
            "failed": self.counters.get("failed", 0),
            "elapsed_seconds": time.time() - self.start_time,
        }

    def report(self) -> None:
        """Log the run summary."""
        summary = self.get_summary()
        logger.info(
            f"Done in {summary['elapsed_seconds']:.1f}s | "
            f"Pages: {summary['pages']} | "
            f"Centers: {summary['centers']} | "
            f"With slots: {summary['reported']} | "
            f"Excluded: {summary['excluded']} | "
            f"No slots: {summary['no_slots']} | "
            f"Failed: {summary['failed']}"
        )
