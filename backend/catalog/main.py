"""FastAPI application entrypoint and HTTP controllers.

This module defines the HTTP endpoints of the study materials catalog.
Controllers are intentionally thin: they parse path and query values,
delegate to `CatalogService`, and return JSON responses. Every route is
served both at the root and under the `/api` prefix.

Endpoints implemented:
- GET /materials
- GET /materials/featured
- GET /materials/browse
- GET /materials/{id}
- GET /materials/search/{query}
- GET /materials/category/{category}
- GET /materials/subject/{subject}
- GET /materials/year-level/{yearLevel}
- POST /materials/{id}/download
- POST /materials
- GET /download/{id}
- GET /categories/counts
- GET /meta
"""

import json
import logging
import re
import time
import uuid
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response

from . import models, query, schemas, services
from .config import settings
from .errors import CatalogError, InvalidEnum, MaterialValidationError
from .repositories import MaterialStore
from .utils.sample_data import sample_drafts

logger = logging.getLogger("catalog.api")
if not logger.handlers:
    logging.basicConfig(level=settings.LOG_LEVEL)

router = APIRouter()


def get_service(request: Request) -> services.CatalogService:
    """Dependency returning a service bound to the application's store."""
    return services.CatalogService(request.app.state.store)


def _http_error(exc: CatalogError) -> HTTPException:
    if isinstance(exc, MaterialValidationError):
        return HTTPException(status_code=exc.status_code, detail={"message": exc.message, "errors": exc.errors})
    return HTTPException(status_code=exc.status_code, detail=exc.message)


@router.get('/materials', response_model=List[schemas.MaterialOut])
def list_materials(svc: services.CatalogService = Depends(get_service)):
    """Return every material in store order."""
    return svc.list_all()


@router.get('/materials/featured', response_model=List[schemas.MaterialOut])
def featured_materials(limit: Optional[int] = None, svc: services.CatalogService = Depends(get_service)):
    """Return featured materials, first-come, up to `limit` (default 4)."""
    return svc.featured(limit)


@router.get('/materials/browse', response_model=List[schemas.MaterialOut])
def browse_materials(
    category: List[str] = Query(default=[]),
    subject: str = "all",
    year_level: List[str] = Query(default=[], alias="yearLevel"),
    q: Optional[str] = None,
    sort: str = "popular",
    svc: services.CatalogService = Depends(get_service),
):
    """Filter by categories, subject and year levels, then sort.

    Repeat `category` and `yearLevel` to select several values. `q`
    narrows the result by search and drives `relevance` ordering.
    """
    try:
        filters = services.build_filter_state(category, subject, year_level)
    except InvalidEnum as e:
        raise _http_error(e)
    return svc.browse(filters, sort=sort, text=q)


@router.get('/materials/search/{query:path}', response_model=List[schemas.MaterialOut])
def search_materials(query: str, svc: services.CatalogService = Depends(get_service)):
    """Search title, description, author and institution.

    Queries shorter than `SEARCH_MIN_LENGTH` return an empty list.
    """
    return svc.search(query)


@router.get('/materials/category/{category}', response_model=List[schemas.MaterialOut])
def materials_by_category(category: str, svc: services.CatalogService = Depends(get_service)):
    try:
        return svc.by_category(category)
    except InvalidEnum as e:
        raise _http_error(e)


@router.get('/materials/subject/{subject}', response_model=List[schemas.MaterialOut])
def materials_by_subject(subject: str, svc: services.CatalogService = Depends(get_service)):
    try:
        return svc.by_subject(subject)
    except InvalidEnum as e:
        raise _http_error(e)


@router.get('/materials/year-level/{year_level}', response_model=List[schemas.MaterialOut])
def materials_by_year_level(year_level: str, svc: services.CatalogService = Depends(get_service)):
    try:
        return svc.by_year_level(year_level)
    except InvalidEnum as e:
        raise _http_error(e)


@router.get('/materials/{material_id}', response_model=schemas.MaterialOut)
def get_material(material_id: str, svc: services.CatalogService = Depends(get_service)):
    """Return a single material, 404 if unknown and 400 for a non-numeric id."""
    try:
        return svc.get(services.parse_id(material_id))
    except CatalogError as e:
        raise _http_error(e)


@router.post('/materials/{material_id}/download', response_model=schemas.MaterialOut)
def record_download(material_id: str, svc: services.CatalogService = Depends(get_service)):
    """Increment the download counter and return the updated material."""
    try:
        return svc.record_download(services.parse_id(material_id))
    except CatalogError as e:
        raise _http_error(e)


@router.post('/materials', response_model=schemas.MaterialOut, status_code=201)
def create_material(payload: Any = Body(...), svc: services.CatalogService = Depends(get_service)):
    """Create a material from a draft (no id, downloads or createdAt).

    Invalid drafts are rejected with 400 and one entry per offending field.
    """
    try:
        draft = schemas.parse_material_in(payload)
    except MaterialValidationError as e:
        raise _http_error(e)
    return svc.create(draft)


@router.get('/download/{material_id}')
def download_material(material_id: str, svc: services.CatalogService = Depends(get_service)):
    """Count a download and answer as the file endpoint would.

    No file is streamed; the counter is incremented regardless of what the
    client does with the response.
    """
    try:
        material = svc.record_download(services.parse_id(material_id))
    except CatalogError as e:
        raise _http_error(e)
    body = schemas.DownloadOut(message="Download started", material=schemas.MaterialOut.model_validate(material))
    filename = re.sub(r"\s+", "-", material.title).encode("ascii", "ignore").decode("ascii").replace('"', "")
    return JSONResponse(
        content=body.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{filename}.pdf"'},
    )


@router.get('/categories/counts', response_model=Dict[str, int])
def category_counts(svc: services.CatalogService = Depends(get_service)):
    """Return the number of materials per category, zeros included."""
    return svc.category_counts()


@router.get('/meta', response_model=schemas.CatalogMeta)
def catalog_meta():
    """Return the fixed enumerations with labels and the sort options."""
    return schemas.CatalogMeta(
        categories=[schemas.EnumOption(value=c, label=models.category_label(c)) for c in models.CATEGORIES],
        subjects=[schemas.EnumOption(value=s, label=models.subject_label(s)) for s in models.SUBJECTS],
        year_levels=[schemas.EnumOption(value=y, label=models.year_level_label(y)) for y in models.YEAR_LEVELS],
        sort_options=list(query.SORT_OPTIONS),
    )


def create_app(store: Optional[MaterialStore] = None) -> FastAPI:
    """Build the application around `store`.

    When no store is given a new one is created, seeded with the sample
    catalog unless `SEED_SAMPLE_DATA` is false.
    """
    if store is None:
        store = MaterialStore(initial=sample_drafts() if settings.SEED_SAMPLE_DATA else None)

    app = FastAPI(title="BSc Study Materials Catalog API")
    app.state.store = store

    # Wide-open CORS keeps local frontends on other ports working in dev.
    if settings.ALLOW_DEV_CORS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next):
        req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
        request.state.request_id = req_id
        started = time.perf_counter()
        response: Response
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
            logger.exception(
                "request_failed %s",
                json.dumps(
                    {
                        "request_id": req_id,
                        "path": request.url.path,
                        "method": request.method,
                        "duration_ms": elapsed_ms,
                        "client": request.client.host if request.client else "unknown",
                    },
                    ensure_ascii=True,
                ),
            )
            raise
        response.headers["X-Request-ID"] = req_id
        elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
        logger.info(
            "request_done %s",
            json.dumps(
                {
                    "request_id": req_id,
                    "path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "duration_ms": elapsed_ms,
                },
                ensure_ascii=True,
            ),
        )
        return response

    app.include_router(router)
    app.include_router(router, prefix="/api")

    @app.get("/", response_class=HTMLResponse)
    def home():
        """Minimal homepage for quick manual testing."""
        return """
        <!DOCTYPE html>
        <html>
        <head>
          <meta charset="UTF-8" />
          <title>Study Materials Catalog</title>
          <style>
            body { font-family: Arial, sans-serif; margin: 32px; }
            a { color: #0a6; }
            .card { max-width: 640px; padding: 16px; border: 1px solid #ddd; border-radius: 8px; }
          </style>
        </head>
        <body>
          <div class="card">
            <h1>BSc Study Materials Catalog</h1>
            <p>Quick links for local testing:</p>
            <ul>
              <li><a href="/docs">Swagger UI</a></li>
              <li><a href="/materials">All materials</a></li>
              <li><a href="/materials/featured">Featured materials</a></li>
              <li><a href="/categories/counts">Category counts</a></li>
            </ul>
            <p>Try <code>/materials/search/quantum</code> or <code>/materials/browse?subject=physics&amp;sort=az</code>.</p>
          </div>
        </body>
        </html>
        """

    @app.get("/health")
    def health():
        """Lightweight health check for uptime monitoring."""
        return {"status": "ok", "materials": app.state.store.count()}

    return app


app = create_app()
