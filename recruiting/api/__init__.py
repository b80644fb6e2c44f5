"""
API module - FastAPI routers and form binding.

Usage:
    from recruiting.api import api_router
    app.include_router(api_router)
"""

from recruiting.api.routes import api_router

__all__ = ["api_router"]
