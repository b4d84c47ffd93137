"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from docsearch.api.v1.dependencies.
"""

from fastapi import APIRouter

from docsearch.api.v1.endpoints import docs, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(docs.router, prefix="/docs", tags=["docs"])
