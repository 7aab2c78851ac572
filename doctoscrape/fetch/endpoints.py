"""URL builders for Doctolib endpoints."""
from doctoscrape.config import config


def _motive_params() -> str:
    return "&".join(f"ref_visit_motive_ids[]={motive}" for motive in config.VISIT_MOTIVE_IDS)


def get_search_url(postal_code: str, city: str, page: int) -> str:
    """Get the search results URL for a zero-based page index.

    The site paginates from page=2 onwards, so index 0 carries no page
    parameter and index n maps to page=n+1.
    """
    url = (
        f"{config.BASE_URL}/vaccination-covid-19/{postal_code}-{city}"
        f"?{_motive_params()}&force_max_limit={config.FORCE_MAX_LIMIT}"
    )
    if page > 0:
        url += f"&page={page + 1}"
    return url


def get_detail_url(center_id: str) -> str:
    """Get the JSON availability URL for a center."""
    return (
        f"{config.BASE_URL}/search_results/{center_id}.json"
        f"?limit={config.DETAIL_LIMIT}&{_motive_params()}"
        f"&speciality_id={config.SPECIALITY_ID}"
        f"&search_result_format=json&force_max_limit={config.FORCE_MAX_LIMIT}"
    )


def get_center_url(relative_url: str) -> str:
    """Make a site-relative center path absolute."""
    return f"{config.BASE_URL}{relative_url}"
