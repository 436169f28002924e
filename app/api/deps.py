# app/api/deps.py
from fastapi import Depends
from app.core.config import Settings, get_settings
from app.db.upstream import get_client
from app.domain.repositories.analytics_source_repo import AnalyticsSourceRepo

# Dependency for injecting the upstream analytics sources into endpoints/services
def analytics_source_repo(settings: Settings = Depends(get_settings)) -> AnalyticsSourceRepo:
    return AnalyticsSourceRepo(
        get_client(),
        analytics_path=settings.analytics_path,
        performance_path=settings.performance_path,
    )
