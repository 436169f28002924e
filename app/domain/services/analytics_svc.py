import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Optional

from app.core.config import Settings, get_settings
from app.domain.models.performance import ClassificationResult
from app.domain.repositories.analytics_source_repo import AnalyticsSourceRepo
from app.domain.services.performance_classifier import PerformanceClassifier

logger = logging.getLogger(__name__)


async def get_performance_analytics_svc(
    repo: AnalyticsSourceRepo,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> ClassificationResult:
    """
    Fetch both upstream sources concurrently, then classify the performance array.
    - Both must succeed: on the first failure the other fetch is cancelled and
      AnalyticsFetchError propagates; nothing is classified.
    - No retries and no caching, every call classifies a fresh snapshot.
    """
    t0 = time.perf_counter()
    settings = settings or get_settings()
    now = now or datetime.now(timezone.utc)
    logger.info("performance_analytics start now=%s", now.isoformat())

    analytics_task = asyncio.ensure_future(repo.get_product_analytics())
    performance_task = asyncio.ensure_future(repo.get_product_performance())
    try:
        _analytics, performance = await asyncio.gather(analytics_task, performance_task)
    except Exception:
        for task in (analytics_task, performance_task):
            task.cancel()
        logger.error("performance_analytics aborted: upstream fetch failed")
        raise
    fetch_dt = time.perf_counter() - t0
    logger.info("performance_analytics fetched records=%s fetch_time=%.3fs", len(performance), fetch_dt)

    classifier = PerformanceClassifier.from_settings(settings)
    result = classifier.classify(performance, now)

    logger.info(
        "performance_analytics done saleable=%s/%s non_saleable=%s/%s rated=%s total_time=%.3fs",
        len(result.top_saleable_products), result.saleable_count,
        len(result.non_saleable_products), result.non_saleable_count,
        len(result.current_rated_products), time.perf_counter() - t0,
    )
    return result
