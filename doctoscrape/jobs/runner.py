"""Job runner orchestrating the search pipeline."""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional

from doctoscrape.config import config
from doctoscrape.errors import ScrapeError
from doctoscrape.fetch.client import FetchClient
from doctoscrape.fetch.endpoints import get_detail_url, get_search_url
from doctoscrape.jobs.metrics import Metrics
from doctoscrape.jobs.report import DetailResult, report
from doctoscrape.parse.detail import parse_detail
from doctoscrape.parse.models import DetailResponse
from doctoscrape.parse.search_page import extract_center_ids

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchQuery:
    """What to search for, built once from the command line."""

    postal_code: str
    city: str = "paris"
    page_count: int = 1
    excluded_postal_codes: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.page_count < 1:
            raise ValueError(f"page_count must be positive, got {self.page_count}")


class SearchRunner:
    """Fetches every requested page, then every center found on them."""

    def __init__(self, client: FetchClient, skip_malformed: Optional[bool] = None):
        self.client = client
        self.skip_malformed = config.SKIP_MALFORMED_IDS if skip_malformed is None else skip_malformed
        self.metrics = Metrics()

    async def fetch_page(self, postal_code: str, city: str, page: int) -> list[str]:
        """Fetch one search page and return the center ids found on it."""
        url = get_search_url(postal_code, city, page)
        html_content = await self.client.fetch_text(url)
        center_ids = extract_center_ids(html_content, skip_malformed=self.skip_malformed)
        logger.debug(f"Page {page + 1}: {len(center_ids)} centers")
        self.metrics.increment("pages")
        return center_ids

    async def fetch_detail(self, center_id: str) -> DetailResponse:
        """Fetch and decode one center's availabilities."""
        body = await self.client.fetch_bytes(get_detail_url(center_id))
        return parse_detail(center_id, body)

    async def _detail_result(self, center_id: str) -> DetailResult:
        try:
            detail = await self.fetch_detail(center_id)
        except ScrapeError as e:
            return DetailResult(center_id=center_id, error=e)
        return DetailResult(center_id=center_id, detail=detail)

    async def _page_results(self, query: SearchQuery, page: int) -> list[DetailResult]:
        center_ids = await self.fetch_page(query.postal_code, query.city, page)
        return await asyncio.gather(*(self._detail_result(center_id) for center_id in center_ids))

    async def collect(self, query: SearchQuery) -> list[DetailResult]:
        """
        Run all page fetches concurrently, each fanning out to its detail
        fetches. A failing page propagates and aborts the run; a failing
        center only yields a DetailResult carrying the error.
        """
        pages = await asyncio.gather(
            *(self._page_results(query, page) for page in range(query.page_count))
        )
        return [result for page_results in pages for result in page_results]

    async def run(self, query: SearchQuery) -> list[DetailResult]:
        """Collect every center's details and report them in page order."""
        logger.info(
            f"Searching {query.postal_code}-{query.city} "
            f"({query.page_count} page(s), excluding {sorted(query.excluded_postal_codes) or 'none'})"
        )
        results = await self.collect(query)

        for result in results:
            self.metrics.increment("centers")
            if report(result, query.excluded_postal_codes) is not None:
                self.metrics.increment("reported")
            elif not result.ok:
                self.metrics.increment("failed")
            elif result.detail.search_result.zipcode in query.excluded_postal_codes:
                self.metrics.increment("excluded")
            else:
                self.metrics.increment("no_slots")

        self.metrics.report()
        return results
