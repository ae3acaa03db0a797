"""
PC Catalog Infrastructure Module
Read-only catalog data sources
"""

from .catalog_source import (
    CatalogSource,
    ComponentRecord,
    InMemoryCatalogSource,
    get_reference_catalog,
)

__all__ = [
    "CatalogSource",
    "ComponentRecord",
    "InMemoryCatalogSource",
    "get_reference_catalog",
]
