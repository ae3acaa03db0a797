"""
PC Catalog Engine Module
Filter → Sort → Paginate stages and their composition
"""

from .component_filter import filter_components
from .component_sorter import SORT_KEYS, sort_components
from .paginator import DEFAULT_PER_PAGE, paginate_components, parse_page
from .pipeline import ComponentQuery, NoDataAvailable, PipelineResult, run_pipeline

__all__ = [
    "filter_components",
    "SORT_KEYS",
    "sort_components",
    "DEFAULT_PER_PAGE",
    "paginate_components",
    "parse_page",
    "ComponentQuery",
    "NoDataAvailable",
    "PipelineResult",
    "run_pipeline",
]
