from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from datetime import datetime, timezone

from app.api.deps import analytics_source_repo
from app.domain.models.dashboard import DashboardOut
from app.domain.models.performance import ClassificationResult
from app.domain.errors import AnalyticsFetchError
from app.domain.repositories.analytics_source_repo import AnalyticsSourceRepo
from app.domain.services.analytics_svc import get_performance_analytics_svc
from app.domain.services.constants import STATE_ERROR
from app.domain.services.presentation import build_dashboard

import logging
import time
logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analytics", tags=["analytics"])

FETCH_FAILED_RESPONSE = {502: {"description": "Upstream fetch failed"}}


async def _classify(op: str, repo: AnalyticsSourceRepo, now: datetime) -> ClassificationResult | JSONResponse:
    logger.info("Request: %s", op)
    t0 = time.perf_counter()
    try:
        result = await get_performance_analytics_svc(repo, now=now)
    except AnalyticsFetchError as e:
        logger.error("Response: %s failed source=%s", op, e.source)
        return JSONResponse(status_code=502, content={"state": STATE_ERROR, "detail": e.message})

    logger.info(
        "Response: %s saleable=%s non_saleable=%s rated=%s in %.4fs",
        op, result.saleable_count, result.non_saleable_count, len(result.current_rated_products),
        time.perf_counter() - t0,
    )
    return result


@router.get("/health")
def analytics_health():
    return {"ok": True}

@router.get("/performance", response_model=DashboardOut, responses=FETCH_FAILED_RESPONSE)
async def get_performance_analytics(repo: AnalyticsSourceRepo = Depends(analytics_source_repo)):
    """
    Saleable / non-saleable / rated-today buckets and the distribution split.
    Both upstream sources must answer; otherwise 502 with a generic message.
    """
    now = datetime.now(timezone.utc)
    result = await _classify("performance_analytics", repo, now)
    if isinstance(result, JSONResponse):
        return result
    return build_dashboard(result, generated_at=now)

@router.get(
    "/performance/raw",
    responses={200: {"model": ClassificationResult, "description": "Bare classification"}, **FETCH_FAILED_RESPONSE},
)
async def get_performance_classification(repo: AnalyticsSourceRepo = Depends(analytics_source_repo)):
    """
    The classification itself with camelCase keys.
    Records are returned as received, without defaulted fields.
    """
    result = await _classify("performance_classification", repo, datetime.now(timezone.utc))
    if isinstance(result, JSONResponse):
        return result
    return JSONResponse(content=result.model_dump(mode="json", by_alias=True, exclude_unset=True))
