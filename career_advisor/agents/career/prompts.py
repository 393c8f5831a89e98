"""
Career Advisor Prompt Templates

Contains the system prompt, the user prompt builder, and the function-calling
tool definition sent to the AI gateway.

Architecture:
- Pattern: Single forced tool call (one request, one structured response)
- API: OpenAI-compatible chat completions behind the AI gateway
- Output: Arguments of `provide_recommendations`, shaped by the JSON schema
  below. The schema is enforced by the model provider, not locally.
"""

from typing import Any, Dict

# =============================================================================
# SYSTEM PROMPT
# =============================================================================

CAREER_ADVISOR_SYSTEM_PROMPT = (
    "You are an expert career and education advisor. "
    "Always use the provide_recommendations tool to return structured results."
)


# =============================================================================
# USER PROMPT BUILDER
# =============================================================================

def _format_cgpa(cgpa: float) -> str:
    # 3.5 -> "3.5", 4.0 -> "4"
    return f"{cgpa:g}"


def build_career_advisor_user_prompt(
    interests: str,
    degree: str,
    cgpa: float,
    career_goal: str,
) -> str:
    """
    Build the user prompt embedding the student's profile verbatim.

    Args:
        interests: Student's interests or skills
        degree: Degree name
        cgpa: CGPA on a 4.0 scale
        career_goal: Student's stated career goal

    Returns:
        str: Prompt ready to be sent as the user message
    """
    return f"""You are a career and education advisor. A student has the following profile:
- Interests: {interests}
- Degree: {degree}
- CGPA: {_format_cgpa(cgpa)}/4.0
- Career Goal: {career_goal}

Based on this profile, provide personalized career recommendations using the provide_recommendations function."""


# =============================================================================
# TOOL DEFINITION
# =============================================================================

RECOMMENDATION_TOOL_NAME = "provide_recommendations"

RECOMMENDATION_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": RECOMMENDATION_TOOL_NAME,
        "description": "Provide structured career recommendations for a student.",
        "parameters": {
            "type": "object",
            "properties": {
                "careers": {
                    "type": "array",
                    "description": "Exactly 3 career suggestions",
                    "items": {
                        "type": "object",
                        "properties": {
                            "title": {
                                "type": "string",
                                "description": "Career title",
                            },
                            "description": {
                                "type": "string",
                                "description": "Brief description of why this career fits (1-2 sentences)",
                            },
                            "relevance": {
                                "type": "string",
                                "enum": ["High", "Medium", "Low"],
                                "description": "How relevant this career is to the student's profile",
                            },
                        },
                        "required": ["title", "description", "relevance"],
                        "additionalProperties": False,
                    },
                },
                "skills": {
                    "type": "array",
                    "description": "5-8 skills the student should learn",
                    "items": {"type": "string"},
                },
                "advice": {
                    "type": "string",
                    "description": "A short personalized paragraph of guidance (3-5 sentences)",
                },
            },
            "required": ["careers", "skills", "advice"],
            "additionalProperties": False,
        },
    },
}

RECOMMENDATION_TOOL_CHOICE: Dict[str, Any] = {
    "type": "function",
    "function": {"name": RECOMMENDATION_TOOL_NAME},
}
