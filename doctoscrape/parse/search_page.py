"""Extract center identifiers from a search results page."""
import logging

from selectolax.lexbor import LexborHTMLParser, LexborNode

from doctoscrape.errors import ParseError

logger = logging.getLogger(__name__)

RESULT_SELECTOR = ".dl-search-result"


def get_center_id(element_id: str) -> str:
    """Return the part of an element id after its last '-'.

    "search-result-123" -> "123"
    """
    prefix, sep, center_id = element_id.rpartition("-")
    if not sep or not center_id:
        raise ParseError(f"Malformed result element id: {element_id!r}")
    return center_id


def _element_center_id(node: LexborNode) -> str:
    element_id = node.attributes.get("id")
    if not element_id:
        raise ParseError(f"Result element <{node.tag}> has no id attribute")
    return get_center_id(element_id)


def extract_center_ids(html_content: str, skip_malformed: bool = False) -> list[str]:
    """
    Extract one center id per search result element, in document order.
    Raises ParseError when the page has no result elements, or when an
    element's id is missing/malformed and skip_malformed is False.
    """
    if not html_content:
        raise ParseError("Empty search page")

    parser = LexborHTMLParser(html_content)
    results = parser.css(RESULT_SELECTOR)
    if not results:
        raise ParseError(f"No {RESULT_SELECTOR} elements found")

    center_ids = []
    for node in results:
        # One part per text node, whitespace-only nodes dropped
        texts = node.text(deep=True, separator="\x00").split("\x00")
        logger.debug(", ".join(text.strip() for text in texts if text.strip()))
        try:
            center_ids.append(_element_center_id(node))
        except ParseError as e:
            if not skip_malformed:
                raise
            logger.warning(f"Skipping result element: {e}")

    return center_ids
