"""
Client side of the career advisor: form state, validation and submission.
"""

from career_advisor.client.form_controller import (
    CareerAdvisorFormController,
    FormState,
    Notification,
)
from career_advisor.client.views import CareerCard, LoadingView, ResultsView

__all__ = [
    "CareerAdvisorFormController",
    "FormState",
    "Notification",
    "CareerCard",
    "LoadingView",
    "ResultsView",
]
