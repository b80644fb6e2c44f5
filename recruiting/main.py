"""
Recruiting Platform - Main Application

FastAPI backend with:
- MySQL (SQLAlchemy) or MongoDB (pymongo) behind the same gateways
- Consultant profiles: personal details, experiences, educations, languages, skills
- User administration with JWT authentication

Run: uvicorn recruiting.main:app --reload
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from recruiting import __version__
from recruiting.api.routes import api_router
from recruiting.core.config import get_settings
from recruiting.core.exceptions import EntityNotFoundError
from recruiting.core.logging_config import setup_logging
from recruiting.services.user_service import get_user_service

logger = logging.getLogger(__name__)
settings = get_settings()

# Create FastAPI app
app = FastAPI(
    title="Recruiting Platform",
    description="""
    Consultant recruiting and profile management.

    ## Features
    - **Consultants**: Registration, search by name/last name/skills, profile editing
    - **Profile**: Experiences, educations, languages and skills
    - **Users**: Administration of application users and roles
    - **Authentication**: JWT bearer tokens

    ## Databases
    - MySQL: normalized tables (default)
    - MongoDB: one document per consultant (`DATASTORE=mongodb`)
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware (allow all for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


@app.exception_handler(EntityNotFoundError)
async def entity_not_found_handler(request: Request, exc: EntityNotFoundError):
    logger.info("%s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": "Page not found"})


def init_datastore() -> None:
    """Create the MySQL schema or the Mongo indexes, then seed the accounts."""
    if settings.datastore == "mongodb":
        from recruiting.db.mongodb import init_mongo_indexes
        init_mongo_indexes()
    else:
        from recruiting.db.mysql import init_mysql_schema
        init_mysql_schema()
    logger.info("Initialized %s datastore", settings.datastore)

    get_user_service().ensure_default_accounts(settings.admin_username, settings.admin_password)


# Startup event
@app.on_event("startup")
def startup_event():
    setup_logging()
    init_datastore()


@app.get("/", tags=["Health"])
def root():
    return {"status": "healthy", "app": "Recruiting Platform", "version": __version__}


@app.get("/health", tags=["Health"])
def health_check():
    """Detailed health check of the configured datastore."""
    if settings.datastore == "mongodb":
        from recruiting.db.mongodb import check_mongo_connection
        connected = check_mongo_connection()
    else:
        from recruiting.db.mysql import check_mysql_connection
        connected = check_mysql_connection()

    return {
        "status": "healthy" if connected else "degraded",
        settings.datastore: "connected" if connected else "disconnected",
    }
