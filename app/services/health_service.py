import math
from typing import Any, Dict

from app.core.config import Settings
from app.core.db import MongoDatabase
from app.core.metrics import MetricsCollector


def build_health_report(
    settings: Settings,
    metrics: MetricsCollector,
    database: MongoDatabase,
) -> Dict[str, Any]:
    """Liveness report; the database state is reported, never raised."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "uptime": math.floor(metrics.uptime_seconds()),
        "mongo": "connected" if database.is_connected() else "disconnected",
        "hostname": settings.hostname,
        "environment": settings.environment,
    }
