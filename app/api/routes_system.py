# app/api/routes_system.py
from fastapi import APIRouter, Depends, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST

from app.core.config import Settings
from app.core.db import MongoDatabase, get_database
from app.core.metrics import MetricsCollector, get_metrics
from app.schemas.health import HealthRead
from app.services.health_service import build_health_report

router = APIRouter(tags=["system"])


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/health", response_model=HealthRead)
def health_check(
    settings: Settings = Depends(get_app_settings),
    metrics: MetricsCollector = Depends(get_metrics),
    database: MongoDatabase = Depends(get_database),
):
    return build_health_report(settings, metrics, database)


@router.get("/metrics", response_class=Response)
def metrics_endpoint(metrics: MetricsCollector = Depends(get_metrics)):
    return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)
