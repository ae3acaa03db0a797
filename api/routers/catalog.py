"""Catalog Router - HTML views over the component catalog"""
import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from slowapi import Limiter

from api.config import Settings
from api.dependencies import get_catalog, get_templates
from api.rate_limit import limit_route
from api.services import catalog_service
from pc_catalog_core.engine.pipeline import ComponentQuery
from pc_catalog_core.infra.catalog_source import CatalogSource

logger = logging.getLogger(__name__)


def index(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    """Landing page"""
    return templates.TemplateResponse(request, "index.html", {})


def list_components(
    request: Request,
    catalog: CatalogSource = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates),
):
    """Full catalog, no filtering or paging"""
    return templates.TemplateResponse(
        request,
        "components.html",
        {"components": catalog_service.list_all(catalog), "pagination": None},
    )


def filtered_components(
    request: Request,
    component_type: str = Query("", alias="type"),
    brand: str = "",
    sort: str = "",
    page: str = "",
    catalog: CatalogSource = Depends(get_catalog),
    templates: Jinja2Templates = Depends(get_templates),
):
    """
    Filter → Sort → Paginate

    All query parameters are optional. Unknown ``sort`` values keep catalog
    order and a missing or invalid ``page`` means page 1. Empty results are
    answered with 404 by the NoDataAvailable handler.
    """
    query = ComponentQuery(type=component_type, brand=brand, sort=sort, page=page)
    result = catalog_service.filtered_page(
        catalog, query, trace_id=getattr(request.state, "trace_id", None)
    )

    return templates.TemplateResponse(
        request,
        "components.html",
        {"components": result.components, "pagination": result, "query": query},
    )


def build_router(limiter: Limiter, settings: Settings) -> APIRouter:
    """Catalog routes, each admitted through the shared rate limit"""
    router = APIRouter(tags=["catalog"])
    for path, endpoint in (
        ("/", index),
        ("/components", list_components),
        ("/filtered-components", filtered_components),
    ):
        router.add_api_route(
            path,
            limit_route(limiter, settings, endpoint),
            methods=["GET"],
            response_class=HTMLResponse,
        )
    return router
