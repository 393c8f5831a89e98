"""
View models for the career advisor form.

The form shows either a loading placeholder while a request is in flight or
the three-part results (career cards, skill badges, advice). These classes
describe what to render; any UI layer (terminal, template, widget) draws them.
"""

from dataclasses import dataclass, field
from typing import List

from career_advisor.schemas.career import CareerRecommendations

CAREER_PLACEHOLDER_COUNT = 3
SKILL_PLACEHOLDER_COUNT = 5


@dataclass(frozen=True)
class LoadingView:
    """Skeleton shown while a recommendation request is in flight."""
    career_placeholders: int = CAREER_PLACEHOLDER_COUNT
    skill_placeholders: int = SKILL_PLACEHOLDER_COUNT
    advice_placeholder: bool = True


@dataclass(frozen=True)
class CareerCard:
    title: str
    description: str
    relevance: str

    @property
    def badge(self) -> str:
        """Label for the relevance badge, e.g. 'High Relevance'."""
        return f"{self.relevance} Relevance"


@dataclass(frozen=True)
class ResultsView:
    """Career suggestions, skills to learn and advice, in display order."""
    career_cards: List[CareerCard] = field(default_factory=list)
    skill_badges: List[str] = field(default_factory=list)
    advice: str = ""

    @classmethod
    def from_recommendations(cls, recommendations: CareerRecommendations) -> "ResultsView":
        return cls(
            career_cards=[
                CareerCard(
                    title=career.title,
                    description=career.description,
                    relevance=career.relevance,
                )
                for career in recommendations.careers
            ],
            skill_badges=list(recommendations.skills),
            advice=recommendations.advice,
        )
