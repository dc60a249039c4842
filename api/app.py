"""
FastAPI Application

Main application entry point with router registration and startup events.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import photoprep
from api.config import APP_DESCRIPTION, APP_TITLE, CORS_ORIGINS, configure_logging
from api.routes import (
    health_router,
    staging_router,
)
from photoprep.data import RULES_VERSION, describe_rules

configure_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=APP_TITLE,
    description=APP_DESCRIPTION,
    version=photoprep.__version__,
)

# CORS (browser capture UI)
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(staging_router, tags=["Staging"])


@app.on_event("startup")
async def startup_event():
    """Log rule table sizes on API startup"""
    rules = describe_rules()
    logger.info(
        f"[Startup] rules {RULES_VERSION}: {rules['room_types']} room types, "
        f"{rules['clutter_keywords']} clutter keywords, {rules['keep_furniture']} fixed furniture"
    )
