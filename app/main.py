"""FastAPI application entry point.

Vb Records Service - REST resources for employees and staff members with
field validation and the age-tiered employee salary policy.
"""

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import settings
from routers.v1 import router as v1_router

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Vb Records Service",
    description="""
    Service for managing employee and staff records.

    ## Features

    - Create, read, update and delete employees and staff members
    - Field validation reported all at once:
        - Name length
        - Email and phone format
        - Hourly salary range
    - Employee age rules:
        - At most 65 years old
        - Employees aged 30 or more earn at least 200 per hour

    ## Errors

    Rejected writes answer with a body listing every violation:
    ```
    {"detail": "...", "violations": [{"field": "...", "kind": "...", "message": "..."}]}
    ```
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get(
    "/health",
    tags=["Health"],
    summary="Health Check",
    description="Check if the service is running.",
)
async def health_check() -> dict:
    """Return service health status."""
    return {
        "status": "healthy",
        "service": "vb-records-service",
        "version": "1.0.0",
    }


# Include API routers
app.include_router(
    v1_router,
    prefix="/api",
)

logger.info("Vb Records Service initialized")
