"""
Pydantic schemas for the career advisor endpoint.

These models define the request/response contracts shared by the relay
route and the client form controller. The same `CareerProfile` validation
runs on both sides, so a direct caller cannot push out-of-range values
into the prompt.
"""

import math
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

# ============================================================================
# CONSTANTS
# ============================================================================

DEGREES: List[str] = [
    "Computer Science",
    "Information Technology",
    "Software Engineering",
    "Data Science",
    "Electrical Engineering",
    "Mechanical Engineering",
    "Civil Engineering",
    "Business Administration",
    "Finance",
    "Marketing",
    "Economics",
    "Psychology",
    "Biology",
    "Chemistry",
    "Physics",
    "Mathematics",
    "Arts & Design",
    "Communications",
    "Education",
    "Other",
]

INTERESTS_MAX_LENGTH = 500
CAREER_GOAL_MAX_LENGTH = 300
CGPA_MIN = 0.0
CGPA_MAX = 4.0

Relevance = Literal["High", "Medium", "Low"]


# ============================================================================
# REQUEST MODELS
# ============================================================================

class CareerProfile(BaseModel):
    """
    A student's academic profile submitted for career recommendations.

    Field names on the wire follow the web client (`careerGoal`); Python code
    may populate by attribute name as well.

    Every validation failure carries a user-readable message keyed by the
    wire field name, which the form controller shows inline.
    """
    model_config = ConfigDict(populate_by_name=True)

    interests: str = Field(
        ...,
        description="Free-text interests or skills, comma separated",
        examples=["fastapi, nodejs, docker, cloud, machine learning"]
    )
    degree: str = Field(
        ...,
        description="Degree name, one of the fixed DEGREES list",
        examples=["Computer Science"]
    )
    cgpa: float = Field(
        ...,
        description="Cumulative GPA on a 4.0 scale",
        examples=[3.5]
    )
    career_goal: str = Field(
        ...,
        alias="careerGoal",
        description="Free-text career goal",
        examples=["become a data scientist"]
    )

    @field_validator("interests")
    @classmethod
    def _check_interests(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("interests_required", "Please enter your interests")
        if len(value) > INTERESTS_MAX_LENGTH:
            raise PydanticCustomError(
                "interests_too_long",
                "Interests must be at most {max_length} characters",
                {"max_length": INTERESTS_MAX_LENGTH},
            )
        return value

    @field_validator("degree")
    @classmethod
    def _check_degree(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("degree_required", "Please select your degree")
        if value not in DEGREES:
            raise PydanticCustomError("degree_unknown", "Please select a degree from the list")
        return value

    @field_validator("cgpa", mode="before")
    @classmethod
    def _check_cgpa(cls, value: Any) -> float:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("cgpa_required", "Please enter your CGPA")
        if isinstance(value, bool):
            raise PydanticCustomError("cgpa_not_number", "CGPA must be a number")
        try:
            number = float(value)
        except (TypeError, ValueError, OverflowError):
            raise PydanticCustomError("cgpa_not_number", "CGPA must be a number")
        if math.isnan(number):
            raise PydanticCustomError("cgpa_not_number", "CGPA must be a number")
        if number < CGPA_MIN:
            raise PydanticCustomError("cgpa_too_low", "CGPA must be at least 0.0")
        if number > CGPA_MAX:
            raise PydanticCustomError("cgpa_too_high", "CGPA must be at most 4.0")
        return number

    @field_validator("career_goal")
    @classmethod
    def _check_career_goal(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise PydanticCustomError("career_goal_required", "Please enter your career goal")
        if len(value) > CAREER_GOAL_MAX_LENGTH:
            raise PydanticCustomError(
                "career_goal_too_long",
                "Career goal must be at most {max_length} characters",
                {"max_length": CAREER_GOAL_MAX_LENGTH},
            )
        return value


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class CareerSuggestion(BaseModel):
    """A single suggested career and how well it fits the profile."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., description="Career title", examples=["Data Scientist"])
    description: str = Field(
        ...,
        description="Brief description of why this career fits (1-2 sentences)"
    )
    relevance: Relevance = Field(
        ...,
        description="How relevant this career is to the student's profile"
    )


class CareerRecommendations(BaseModel):
    """
    Structured recommendations returned by the AI gateway tool call.

    The relay returns the tool arguments verbatim; this model only checks
    that they are complete before they reach the caller.
    """
    model_config = ConfigDict(extra="forbid")

    careers: List[CareerSuggestion] = Field(
        ...,
        description="Exactly 3 career suggestions",
        min_length=3,
        max_length=3
    )
    skills: List[str] = Field(
        ...,
        description="5-8 skills the student should learn",
        min_length=5,
        max_length=8
    )
    advice: str = Field(
        ...,
        description="A short personalized paragraph of guidance"
    )


class FieldErrorDetail(BaseModel):
    """A validation failure for one profile field."""
    field: str = Field(..., examples=["cgpa"])
    message: str = Field(..., examples=["CGPA must be at most 4.0"])


class ErrorResponse(BaseModel):
    """Error body returned for every non-2xx career advisor response."""
    error: str = Field(
        ...,
        description="User-readable error message",
        examples=[
            "Rate limit exceeded. Please try again later.",
            "AI usage limit reached. Please add credits.",
            "AI gateway error",
        ]
    )
    details: Optional[List[FieldErrorDetail]] = Field(
        None,
        description="Per-field validation failures (422 only)"
    )


class DegreeListResponse(BaseModel):
    """Response model for GET /career-advisor/degrees."""
    degrees: List[str] = Field(..., description="Selectable degree names")
