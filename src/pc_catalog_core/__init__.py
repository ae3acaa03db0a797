"""
PC Catalog Core Package
Component catalog data source and filter/sort/paginate pipeline
"""

__version__ = "1.0.0"
__author__ = "PC Catalog Development Team"

from . import engine
from . import infra

__all__ = ["engine", "infra"]
