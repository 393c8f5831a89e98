"""
Career Advisor - Forced Tool Call Architecture

This module contains the prompt templates and tool schema for the career
recommendation flow.

The service layer is in:
- career_advisor/services/career_service.py

Prompt templates are in:
- career_advisor/agents/career/prompts.py
"""

from career_advisor.agents.career.prompts import (
    CAREER_ADVISOR_SYSTEM_PROMPT,
    RECOMMENDATION_TOOL,
    RECOMMENDATION_TOOL_CHOICE,
    RECOMMENDATION_TOOL_NAME,
    build_career_advisor_user_prompt,
)

__all__ = [
    "CAREER_ADVISOR_SYSTEM_PROMPT",
    "RECOMMENDATION_TOOL",
    "RECOMMENDATION_TOOL_CHOICE",
    "RECOMMENDATION_TOOL_NAME",
    "build_career_advisor_user_prompt",
]
