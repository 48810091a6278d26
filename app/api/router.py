"""API router"""
from fastapi import APIRouter

from app.api.routes import health

api_router = APIRouter()

# Liveness probe for orchestrators and monitors
api_router.include_router(health.router, tags=["health"])
