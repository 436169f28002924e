# app/api/v1/routers/health.py
import time
import subprocess
from fastapi import APIRouter
from app.core.config import get_settings
from app.db import upstream

router = APIRouter()
START_TIME = time.time()


def _git_sha(short: bool = True) -> str:
    try:
        cmd = ["git", "rev-parse", "--short" if short else "HEAD"]
        return subprocess.check_output(cmd, stderr=subprocess.DEVNULL).decode().strip()
    except (OSError, subprocess.CalledProcessError):
        return "unknown"


@router.get("/health")
async def health():
    """
    Liveness check:
    - basic app info and uptime
    - whether the upstream HTTP client is initialized (no request is made)
    """
    settings = get_settings()
    sha = settings.GIT_SHA if settings.GIT_SHA != "unknown" else _git_sha()
    checks: dict[str, object] = {
        "app_name": settings.APP_NAME,
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
        "version": sha,
        "uptime_seconds": int(time.time() - START_TIME),
        "upstream_base_url": settings.UPSTREAM_BASE_URL,
    }

    try:
        upstream.get_client()
        checks["upstream_client"] = "ok"
    except AssertionError:
        checks["upstream_client"] = "not initialized"

    status = "ok" if checks["upstream_client"] == "ok" else "error"
    return {"status": status, "checks": checks, "timestamp": int(time.time())}
