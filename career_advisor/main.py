"""
FastAPI application entry point for the Career Advisor backend.

This module creates the FastAPI app instance, installs CORS and error
handlers, and registers all routers.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from career_advisor.config import settings
from career_advisor.routes.career_advisor import router as career_advisor_router
from career_advisor.routes.health import router as health_router
from career_advisor.services.errors import CareerAdvisorError
from career_advisor.utils.constants import CORS_ALLOWED_HEADERS, CORS_HEADERS

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="Career Advisor API",
    description="AI-powered career and education recommendations for students",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(CareerAdvisorError)
async def career_advisor_exception_handler(request: Request, exc: CareerAdvisorError):
    """
    Render a failed recommendation request as `{"error": "..."}`.

    The status code comes from the exception (429, 402 or 500).
    """
    logger.error(
        f"{request.method} {request.url.path} failed with "
        f"{exc.status_code}: {exc.message}"
    )

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
        headers=CORS_HEADERS,
    )


# Custom validation error handler to log detailed errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Log validation errors and return per-field messages.

    The first message becomes `error` so clients that only read that field
    still show something useful.
    """
    logger.error(
        f"Validation error on {request.method} {request.url.path}: {exc.errors()}"
    )

    details = [
        {
            "field": str(error["loc"][-1]) if error.get("loc") else "body",
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": details[0]["message"] if details else "Invalid request",
            "details": details,
        },
        headers=CORS_HEADERS,
    )


# Browser clients on any origin may call the advisor
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register routers
app.include_router(health_router)
app.include_router(career_advisor_router)

logger.info("FastAPI app initialized successfully")
