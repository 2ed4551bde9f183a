# 📄 File: profilehub/api/health.py
# 🧭 Purpose (Layman Explanation):
# A quick "are you alive?" check that monitoring tools and load balancers can call
# 🧪 Purpose (Technical Summary):
# Health check endpoints reporting service identity, version, environment, the
# number of users held by the repository and process resource usage
# 🔗 Dependencies:
# FastAPI, pydantic, psutil, application settings (app.state.settings)
# 🔄 Connected Modules / Calls From:
# profilehub.main, monitoring systems, API tests

import platform
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import psutil
from fastapi import APIRouter, Request
from pydantic import BaseModel

from profilehub.shared.config.settings import Settings

health_router = APIRouter(tags=["Health Check"])

# Application start time for uptime calculation
_app_start_time = datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    environment: str
    timestamp: str
    user_count: Optional[int] = None


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Basic Health Check",
    description="Basic health check endpoint for load balancers and monitoring",
)
async def health_check(request: Request) -> HealthResponse:
    """Return a simple OK status for the settings the application was built with."""
    settings: Settings = request.app.state.settings

    user_count = None
    services = getattr(request.app.state, "user_management", None)
    if services is not None:
        user_count = len(await services.user_repository.find_all())

    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        timestamp=datetime.now(timezone.utc).isoformat(),
        user_count=user_count,
    )


@health_router.get(
    "/health/detailed",
    summary="Detailed Health Check",
    description="Health check including process resource usage",
)
async def detailed_health_check(request: Request) -> Dict[str, Any]:
    """
    Health check with process metrics.

    CPU usage is sampled without blocking (interval=None), so the
    first reading in a process may be 0.0.
    """
    basic = await health_check(request)
    process = psutil.Process()
    memory = process.memory_info()
    uptime = datetime.now(timezone.utc) - _app_start_time

    return {
        **basic.model_dump(),
        "uptime_seconds": round(uptime.total_seconds(), 2),
        "system": {
            "platform": platform.system(),
            "python_version": platform.python_version(),
            "cpu_count": psutil.cpu_count(),
        },
        "process": {
            "pid": process.pid,
            "cpu_percent": process.cpu_percent(interval=None),
            "memory_rss_bytes": memory.rss,
            "threads": process.num_threads(),
        },
    }
