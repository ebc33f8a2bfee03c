"""
FastAPI app assembly: logging, middleware and router wiring.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rest_villains.utils.settings import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)
logger.setLevel(settings.log_level)
logger.info("app_startup: log_level=%s", settings.log_level_name)

from rest_villains.api.villains import router as villains_router
from rest_villains.api.support import router as support_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Villain API",
    description="CRUD operations on villains",
    version=settings.service_version,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(villains_router)
app.include_router(support_router)
