"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from recruiting.api.routes.auth_routes import router as auth_router
from recruiting.api.routes.consultant_routes import router as consultant_router
from recruiting.api.routes.user_routes import router as user_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(consultant_router)
api_router.include_router(user_router)
