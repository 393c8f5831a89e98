"""
Service layer for the Career Advisor backend.

Contains business logic orchestration that:
- Adapts endpoint requests to AI gateway calls
- Maps gateway outputs and failures into caller-facing results and errors

Services act as the glue between routes (HTTP layer) and the AI gateway.
"""

from .career_service import (
    build_gateway_payload,
    extract_tool_arguments,
    parse_recommendations,
    request_career_recommendations,
)
from .errors import (
    CareerAdvisorError,
    ConfigurationError,
    MalformedRecommendationsError,
    MissingToolCallError,
    UpstreamCreditsExhaustedError,
    UpstreamGatewayError,
    UpstreamRateLimitError,
)

__all__ = [
    "build_gateway_payload",
    "extract_tool_arguments",
    "parse_recommendations",
    "request_career_recommendations",
    "CareerAdvisorError",
    "ConfigurationError",
    "MalformedRecommendationsError",
    "MissingToolCallError",
    "UpstreamCreditsExhaustedError",
    "UpstreamGatewayError",
    "UpstreamRateLimitError",
]
