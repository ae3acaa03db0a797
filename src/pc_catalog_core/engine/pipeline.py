"""
Catalog pipeline orchestration
Filter → Sort → Paginate over a read-only catalog source
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from pc_catalog_core.infra.catalog_source import CatalogSource, ComponentRecord

from .component_filter import filter_components
from .component_sorter import sort_components
from .paginator import DEFAULT_PER_PAGE, page_count, paginate_components, parse_page

logger = logging.getLogger(__name__)


class NoDataAvailable(Exception):
    """Raised when a query leaves no components to show"""

    def __init__(self, message: str = "No data available"):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ComponentQuery:
    """Per-request query parameters, taken verbatim from untrusted input"""
    type: str = ""
    brand: str = ""
    sort: str = ""
    page: Optional[str] = None


@dataclass
class PipelineResult:
    """A page of components plus the numbers needed to render paging links"""
    components: List[ComponentRecord] = field(default_factory=list)
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE
    total: int = 0

    @property
    def total_pages(self) -> int:
        return page_count(self.total, self.per_page)

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def run_pipeline(
    source: CatalogSource,
    query: ComponentQuery,
    per_page: int = DEFAULT_PER_PAGE,
) -> PipelineResult:
    """
    Run a query through the three stages.

    Sorting and paging never add records, so an empty filter result is
    reported right away. A non-empty result whose requested page falls
    past the end is reported the same way.

    Raises:
        NoDataAvailable: nothing matched, or the page is out of range
    """
    filtered = filter_components(source.list_components(), query.type, query.brand)
    if not filtered:
        logger.debug(f"No components match type={query.type!r} brand={query.brand!r}")
        raise NoDataAvailable()

    ordered = sort_components(filtered, query.sort)
    page_items = paginate_components(ordered, query.page, per_page)
    if not page_items:
        logger.debug(f"Page {query.page!r} is past the end of {len(filtered)} components")
        raise NoDataAvailable()

    return PipelineResult(
        components=page_items,
        page=parse_page(query.page),
        per_page=per_page,
        total=len(filtered),
    )
