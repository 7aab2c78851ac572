"""Filter detail results and log the centers that have open slots."""
import logging
from dataclasses import dataclass
from typing import AbstractSet, Optional

from doctoscrape.errors import JsonDecodeError
from doctoscrape.fetch.endpoints import get_center_url
from doctoscrape.parse.models import DetailResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetailResult:
    """Outcome of one center's detail fetch: either detail or error is set."""

    center_id: str
    detail: Optional[DetailResponse] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def format_report(detail: DetailResponse, start_dates: list[str]) -> str:
    center = detail.search_result
    address = f"{center.address}, {center.zipcode}"
    times = "\n".join(start_dates)
    return f"{center.name_with_title} at {address} has slots!\n{get_center_url(center.url)}\n{times}"


def report(result: DetailResult, excluded_postal_codes: AbstractSet[str]) -> Optional[str]:
    """
    Log one report for a center with open slots and return its text.
    Returns None for failures, excluded zipcodes and centers without slots.
    """
    if not result.ok:
        if isinstance(result.error, JsonDecodeError):
            logger.error(f"JSON parse error: {result.error}")
        else:
            logger.error(f"Failed to fetch center {result.center_id}: {result.error}")
        return None

    detail = result.detail
    if detail.search_result.zipcode in excluded_postal_codes:
        return None

    start_dates = detail.start_dates()
    if not start_dates:
        return None

    text = format_report(detail, start_dates)
    logger.info(text)
    return text
