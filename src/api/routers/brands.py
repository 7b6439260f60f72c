"""API router for brand matching and batch assignment."""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from config import settings
from models import get_db
from models.schemas import (
    BrandAssignmentRequest,
    BrandAssignmentResponse,
    BrandMatchRequest,
    BrandMatchResponse,
)
from services.brand_assignment import assign_brands
from services.brand_matching import BrandMatcher, normalize_title
from services.catalog_loader import CatalogShapeError, load_brand_relations

router = APIRouter()


@lru_cache(maxsize=4)
def _matcher_for(path: str) -> BrandMatcher:
    # Requests share one matcher, so skip the per-batch normalization cache.
    return BrandMatcher.from_relations(load_brand_relations(path), normalizer=normalize_title)


def get_brand_matcher() -> BrandMatcher:
    path = settings.brand_connections_path
    try:
        return _matcher_for(path)
    except FileNotFoundError:
        raise HTTPException(status_code=404, detail=f"Brand relations file not found: {path}")
    except CatalogShapeError as e:
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/match", response_model=BrandMatchResponse)
async def match_title(
    payload: BrandMatchRequest,
    matcher: BrandMatcher = Depends(get_brand_matcher),
) -> BrandMatchResponse:
    """
    Match a single product title against the known brand aliases.

    Args:
        payload: Title to match
        matcher: Brand matcher built from the configured relations file

    Returns:
        Matched aliases, the priority alias and the canonical brand
    """
    result = matcher.match(payload.title)
    return BrandMatchResponse(**result.to_dict())


@router.post("/assignments", response_model=BrandAssignmentResponse, status_code=202)
async def start_assignment(
    payload: BrandAssignmentRequest,
    response: Response,
    db: Session = Depends(get_db),
) -> BrandAssignmentResponse:
    """
    Start brand assignment for one country/source catalog.

    Runs synchronously when ``run_tasks_inline`` is enabled, otherwise the
    batch is handed to the Celery worker.

    Raises:
        HTTPException: If a catalog file is missing or malformed
    """
    if not settings.run_tasks_inline:
        from workers.tasks import assign_brands_task

        task = assign_brands_task.delay(payload.country_code.value, payload.source.value)
        return BrandAssignmentResponse(
            country_code=payload.country_code.value,
            source=payload.source.value,
            status="queued",
            task_id=task.id,
        )

    persist = db if settings.persist_mappings else None
    try:
        summary = assign_brands(payload.country_code, payload.source, db=persist)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Catalog file not found: {e.filename}")
    except CatalogShapeError as e:
        raise HTTPException(status_code=422, detail=str(e))
    if persist is not None:
        db.commit()

    response.status_code = 200
    return BrandAssignmentResponse(
        country_code=summary.country_code,
        source=summary.source,
        status="completed",
        total=summary.total,
        matched=summary.matched,
        output_path=summary.output_path,
    )
