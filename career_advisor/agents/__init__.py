"""
AI Components for the Career Advisor backend.

1. Career Advisor (Single Forced Tool Call)
   - Sends the student profile to an OpenAI-compatible AI gateway
   - Forces the `provide_recommendations` function so the reply is structured
   - Located in: career_advisor/services/career_service.py

There is no multi-step agent loop: one prompt, one tool call, one response.
"""

from career_advisor.agents.career import (
    CAREER_ADVISOR_SYSTEM_PROMPT,
    RECOMMENDATION_TOOL,
    build_career_advisor_user_prompt,
)

__all__ = [
    "CAREER_ADVISOR_SYSTEM_PROMPT",
    "RECOMMENDATION_TOOL",
    "build_career_advisor_user_prompt",
]
