"""
Request-scoped access to the collaborators injected into the app
"""
from fastapi import Request
from fastapi.templating import Jinja2Templates

from pc_catalog_core.infra.catalog_source import CatalogSource


def get_catalog(request: Request) -> CatalogSource:
    return request.app.state.catalog


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
