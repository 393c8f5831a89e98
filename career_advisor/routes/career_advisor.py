"""
FastAPI routes for the career advisor endpoint.

This module exposes the recommendation relay: the browser form posts a
student profile, the service forwards it to the AI gateway, and the
structured tool-call arguments come back as the response body.

Endpoints:
- POST /career-advisor: Get career recommendations for a profile
- OPTIONS /career-advisor: Cross-origin preflight (no body)
- GET /career-advisor/degrees: Degree names accepted in a profile
"""

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from career_advisor.schemas.career import (
    DEGREES,
    CareerProfile,
    CareerRecommendations,
    DegreeListResponse,
    ErrorResponse,
)
from career_advisor.services.career_service import request_career_recommendations
from career_advisor.services.errors import CareerAdvisorError
from career_advisor.utils.constants import CORS_HEADERS

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(
    prefix="/career-advisor",
    tags=["career-advisor"]
)


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.post(
    "",
    response_model=CareerRecommendations,
    status_code=200,
    summary="Get career recommendations",
    responses={
        402: {"model": ErrorResponse, "description": "AI credits exhausted"},
        422: {"model": ErrorResponse, "description": "Invalid profile"},
        429: {"model": ErrorResponse, "description": "AI gateway rate limit"},
        500: {"model": ErrorResponse, "description": "Configuration or gateway error"},
    },
    description="""
    Returns exactly 3 career suggestions, 5-8 skills to learn and a short
    advice paragraph for a student's academic profile.

    **Authentication:** None (public, cross-origin)

    **Frontend Flow:**
    1. Student fills interests, degree, CGPA and career goal
    2. Student clicks "Get Recommendation"
    3. POST /career-advisor with the profile as JSON
    4. Receive either the recommendations or `{"error": "..."}`

    **Errors:**
    - 429: AI gateway rate limit, try again later
    - 402: AI credits exhausted
    - 500: missing configuration or AI gateway failure (details logged only)
    """
)
async def career_advisor_endpoint(profile: CareerProfile) -> JSONResponse:
    """
    Career recommendation endpoint.

    - Parse/Validate: Handled by Pydantic CareerProfile
    - Call LLM: Single forced tool call via the service layer
    - Map output: Tool call arguments are returned unchanged
    - Errors: CareerAdvisorError is rendered by the handler in main.py;
      anything else becomes a 500 carrying the exception message
    """
    logger.info(f"POST /career-advisor called, degree='{profile.degree}'")

    try:
        recommendations = await request_career_recommendations(profile)
    except CareerAdvisorError:
        raise
    except Exception as e:
        logger.exception("career-advisor error")
        raise CareerAdvisorError(str(e) or None)

    return JSONResponse(content=recommendations, headers=CORS_HEADERS)


@router.options(
    "",
    status_code=200,
    summary="Cross-origin preflight",
    include_in_schema=False,
)
async def career_advisor_preflight() -> Response:
    """Answer preflight requests with permissive CORS headers and no body."""
    return Response(status_code=200, headers=CORS_HEADERS)


@router.get(
    "/degrees",
    response_model=DegreeListResponse,
    status_code=200,
    summary="List selectable degrees",
    description="Returns the fixed degree names a profile may carry.",
)
async def list_degrees_endpoint() -> DegreeListResponse:
    """Return the degree names accepted by POST /career-advisor."""
    return DegreeListResponse(degrees=list(DEGREES))
