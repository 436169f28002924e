# app/domain/repositories/analytics_source_repo.py

from __future__ import annotations
import logging
import time
from typing import Any, Dict, List

import httpx

from app.domain.errors import AnalyticsFetchError

logger = logging.getLogger(__name__)

SOURCE_ANALYTICS = "product-analytics"
SOURCE_PERFORMANCE = "product-performance"


class AnalyticsSourceRepo:
    """
    Read-only adapter over the two upstream analytics endpoints.
    Any transport error, non-2xx status or non-JSON body becomes an
    AnalyticsFetchError carrying the generic message.
    """

    def __init__(self, client: httpx.AsyncClient, analytics_path: str, performance_path: str):
        self.client = client
        self.analytics_path = analytics_path
        self.performance_path = performance_path

    async def _get_json(self, source: str, path: str) -> Any:
        t0 = time.perf_counter()
        try:
            resp = await self.client.get(path)
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("upstream %s fetch failed path=%s err=%s", source, path, e)
            raise AnalyticsFetchError(source=source) from e
        logger.info("upstream %s ok status=%s time=%.3fs", source, resp.status_code, time.perf_counter() - t0)
        return payload

    async def get_product_analytics(self) -> Dict[str, Any]:
        """Source A. Not used by the classifier; returned as-is."""
        payload = await self._get_json(SOURCE_ANALYTICS, self.analytics_path)
        return payload if isinstance(payload, dict) else {"data": payload}

    async def get_product_performance(self) -> List[Any]:
        """Source B: the `performance` array, or [] when absent."""
        payload = await self._get_json(SOURCE_PERFORMANCE, self.performance_path)
        performance = payload.get("performance") if isinstance(payload, dict) else None
        if not isinstance(performance, list):
            logger.warning("upstream %s payload has no performance array", SOURCE_PERFORMANCE)
            return []
        return performance
