"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import health, reports, webhook

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(webhook.router, prefix="/webhook", tags=["webhook"])
router.include_router(reports.router, prefix="/reports", tags=["reports"])
