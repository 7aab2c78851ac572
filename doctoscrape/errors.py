"""Error hierarchy for the search pipeline.

Page-level errors abort a run. Detail-level errors are caught per center by
the runner and only logged.
"""


class ScrapeError(Exception):
    """Base exception for all scraping errors."""

    pass


class NetworkError(ScrapeError):
    """Transport failure: DNS, connection refused, timeout."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Network error for {url}: {message}")
        self.url = url


class HttpStatusError(ScrapeError):
    """Non-2xx response."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"HTTP {status_code} for {url}")
        self.url = url
        self.status_code = status_code


class ParseError(ScrapeError):
    """Search page markup did not have the expected shape."""

    pass


class JsonDecodeError(ScrapeError):
    """Detail payload is not JSON or does not match the response models."""

    def __init__(self, center_id: str, message: str):
        super().__init__(f"Invalid detail payload for center {center_id}: {message}")
        self.center_id = center_id
