"""
Catalog Service - query orchestration for the HTTP layer
"""
import logging
from typing import Optional, Tuple

from pc_catalog_core.engine.paginator import DEFAULT_PER_PAGE
from pc_catalog_core.engine.pipeline import ComponentQuery, PipelineResult, run_pipeline
from pc_catalog_core.infra.catalog_source import CatalogSource, ComponentRecord

logger = logging.getLogger(__name__)

# Fixed page size, not exposed as a query parameter
ITEMS_PER_PAGE = DEFAULT_PER_PAGE


def list_all(source: CatalogSource) -> Tuple[ComponentRecord, ...]:
    """Full catalog, unfiltered and unpaginated"""
    return source.list_components()


def filtered_page(
    source: CatalogSource,
    query: ComponentQuery,
    trace_id: Optional[str] = None,
) -> PipelineResult:
    """
    Run ``query`` through the pipeline and log the outcome.

    Raises:
        NoDataAvailable: propagated from the pipeline for empty results
    """
    result = run_pipeline(source, query, per_page=ITEMS_PER_PAGE)

    fields = {
        "trace_id": trace_id,
        "type_filter": query.type,
        "brand_filter": query.brand,
        "sort_by": query.sort,
        "page": query.page,
        "items_per_page": ITEMS_PER_PAGE,
        "filtered_components": result.total,
        "paginated_components": len(result.components),
    }
    logger.info(
        "Filtered and paginated components: "
        + " ".join(f"{key}={value!r}" for key, value in fields.items()),
        extra=fields,
    )
    return result
