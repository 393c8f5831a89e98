"""
Career Advisor Service - Forced Tool Call via the AI Gateway

This service turns a student profile into structured career recommendations
with a single chat-completion request.

Architecture:
- Pattern: Single LLM call with one forced function (`provide_recommendations`)
- API: OpenAI-compatible chat completions behind the AI gateway (httpx)
- Auth: Bearer credential read from the environment at request time
- Output: The tool call's JSON arguments, returned verbatim once they are
  confirmed to be a complete Recommendations object

Failure mapping:
- 429 -> UpstreamRateLimitError (429)
- 402 -> UpstreamCreditsExhaustedError (402)
- other non-2xx / transport failure -> UpstreamGatewayError (500)
- no tool call -> MissingToolCallError (500)
- bad arguments -> MalformedRecommendationsError (500)

No retries are attempted; every failure surfaces on first occurrence.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from career_advisor.agents.career.prompts import (
    CAREER_ADVISOR_SYSTEM_PROMPT,
    RECOMMENDATION_TOOL,
    RECOMMENDATION_TOOL_CHOICE,
    build_career_advisor_user_prompt,
)
from career_advisor.config import settings
from career_advisor.schemas.career import CareerProfile, CareerRecommendations
from career_advisor.services.errors import (
    ConfigurationError,
    MalformedRecommendationsError,
    MissingToolCallError,
    UpstreamCreditsExhaustedError,
    UpstreamGatewayError,
    UpstreamRateLimitError,
)

logger = logging.getLogger(__name__)

# Upper bound on how much of an upstream error body goes into the logs
_LOGGED_BODY_LIMIT = 500


def build_gateway_payload(profile: CareerProfile, model: str) -> Dict[str, Any]:
    """Build the chat-completion request body for the AI gateway."""
    user_prompt = build_career_advisor_user_prompt(
        interests=profile.interests,
        degree=profile.degree,
        cgpa=profile.cgpa,
        career_goal=profile.career_goal,
    )

    return {
        "model": model,
        "messages": [
            {"role": "system", "content": CAREER_ADVISOR_SYSTEM_PROMPT},
            {"role": "user", "content": user_prompt},
        ],
        "tools": [RECOMMENDATION_TOOL],
        "tool_choice": RECOMMENDATION_TOOL_CHOICE,
    }


def extract_tool_arguments(data: Any) -> str:
    """
    Return the arguments string of the first tool call in the first choice.

    Raises:
        MissingToolCallError: If any level of choices/message/tool_calls is
            missing or empty.
    """
    try:
        tool_call = data["choices"][0]["message"]["tool_calls"][0]
        arguments = tool_call["function"]["arguments"]
    except (KeyError, IndexError, TypeError):
        logger.error("AI response did not contain a tool call")
        raise MissingToolCallError()

    if arguments is None:
        logger.error("AI tool call carried no arguments")
        raise MissingToolCallError()

    return arguments


def parse_recommendations(arguments: Any) -> Dict[str, Any]:
    """
    Parse the tool call arguments into the Recommendations object.

    The parsed object is returned unchanged; the CareerRecommendations model
    only confirms it is complete so no partial result reaches the caller.

    Raises:
        MalformedRecommendationsError: On invalid JSON, a non-object, or a
            schema violation.
    """
    if isinstance(arguments, dict):
        # Some gateways hand back already-decoded arguments
        recommendations = arguments
    else:
        try:
            recommendations = json.loads(arguments)
        except (TypeError, json.JSONDecodeError) as e:
            logger.error(f"Failed to parse tool call arguments: {e}")
            raise MalformedRecommendationsError()

    if not isinstance(recommendations, dict):
        logger.error(
            f"Tool call arguments are a {type(recommendations).__name__}, expected an object"
        )
        raise MalformedRecommendationsError()

    try:
        CareerRecommendations.model_validate(recommendations)
    except ValidationError as e:
        logger.error(f"Tool call arguments failed validation: {e.errors()}")
        raise MalformedRecommendationsError()

    return recommendations


def _get_http_client() -> httpx.AsyncClient:
    """Create the per-request client for the AI gateway."""
    return httpx.AsyncClient(timeout=settings.AI_GATEWAY_TIMEOUT_SECONDS)


async def _post_to_gateway(
    client: httpx.AsyncClient,
    api_key: str,
    payload: Dict[str, Any],
) -> httpx.Response:
    try:
        return await client.post(
            settings.AI_GATEWAY_URL,
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            json=payload,
        )
    except httpx.RequestError as e:
        logger.error(f"AI gateway request failed: {type(e).__name__}: {e}")
        raise UpstreamGatewayError()


def _raise_for_gateway_status(response: httpx.Response) -> None:
    if response.is_success:
        return

    if response.status_code == 429:
        logger.warning("AI gateway rate limited the request (429)")
        raise UpstreamRateLimitError()

    if response.status_code == 402:
        logger.warning("AI gateway reported exhausted credits (402)")
        raise UpstreamCreditsExhaustedError()

    logger.error(
        f"AI gateway error: status={response.status_code}, "
        f"body={response.text[:_LOGGED_BODY_LIMIT]}"
    )
    raise UpstreamGatewayError()


async def request_career_recommendations(
    profile: CareerProfile,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Dict[str, Any]:
    """
    Get structured career recommendations for a student profile.

    This function:
    1. Reads the AI gateway credential from the environment
    2. Builds the prompt and forced tool-call payload
    3. Makes exactly one request to the AI gateway
    4. Maps 429/402/other failures to caller-facing errors
    5. Extracts and parses the tool call arguments

    Args:
        profile: Validated student profile
        http_client: Optional client to use instead of a fresh one (the
            caller keeps ownership and closes it)

    Returns:
        Dict with `careers`, `skills` and `advice`, exactly as produced by
        the model's tool call

    Raises:
        CareerAdvisorError subclasses, see career_advisor.services.errors
    """
    logger.info(
        f"request_career_recommendations called: degree='{profile.degree}', "
        f"cgpa={profile.cgpa}, interests_len={len(profile.interests)}, "
        f"career_goal_len={len(profile.career_goal)}"
    )

    api_key = settings.AI_GATEWAY_API_KEY
    if not api_key:
        logger.error("AI_GATEWAY_API_KEY is not configured")
        raise ConfigurationError()

    payload = build_gateway_payload(profile, model=settings.AI_MODEL)

    logger.info(f"Calling AI gateway with model={settings.AI_MODEL}")
    if http_client is not None:
        response = await _post_to_gateway(http_client, api_key, payload)
    else:
        async with _get_http_client() as client:
            response = await _post_to_gateway(client, api_key, payload)

    _raise_for_gateway_status(response)

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"AI gateway returned a non-JSON body: {e}")
        raise UpstreamGatewayError()

    arguments = extract_tool_arguments(data)
    recommendations = parse_recommendations(arguments)

    logger.info(
        f"Returning {len(recommendations['careers'])} careers and "
        f"{len(recommendations['skills'])} skills"
    )
    return recommendations
