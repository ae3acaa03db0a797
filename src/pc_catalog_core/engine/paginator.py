"""
Paginate stage
Fixed-size, 1-based page slicing with lenient page parsing
"""

import math
import re
from typing import List, Optional, Sequence

from pc_catalog_core.infra.catalog_source import ComponentRecord

DEFAULT_PER_PAGE = 3
PAGE_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_PAGE = 2 ** 63 - 1


def parse_page(page: Optional[str]) -> int:
    """
    Parse raw page text; anything that is not an integer >= 1 becomes 1.

    Only an optional sign followed by ASCII digits is accepted, and the
    value must fit a signed 64-bit integer.
    """
    if page is None or not PAGE_PATTERN.fullmatch(page):
        return 1

    value = int(page)
    if value < 1 or value > MAX_PAGE:
        return 1
    return value


def page_count(total: int, per_page: int = DEFAULT_PER_PAGE) -> int:
    """Number of pages needed for ``total`` items"""
    return math.ceil(total / per_page) if total > 0 else 0


def paginate_components(
    components: Sequence[ComponentRecord],
    page: Optional[str],
    per_page: int = DEFAULT_PER_PAGE,
) -> List[ComponentRecord]:
    """
    Return the ``page``-th slice of ``per_page`` components.

    Args:
        components: Ordered components
        page: Raw page number text (invalid or < 1 means page 1)
        per_page: Page size, must be positive

    Returns:
        The slice [start, min(start + per_page, len)), or an empty list
        when the page starts past the end.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    start_idx = (parse_page(page) - 1) * per_page
    if start_idx >= len(components):
        return []

    end_idx = min(start_idx + per_page, len(components))
    return list(components[start_idx:end_idx])
