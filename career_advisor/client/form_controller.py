"""
Client-side form controller for the career advisor.

Holds the four profile fields, validates them with the same CareerProfile
rules the endpoint applies, submits the profile to POST /career-advisor and
tracks what the page should show.

State machine:
    IDLE -> SUBMITTING -> SUCCESS
                       -> FAILED -> IDLE (with a notification)
    IDLE / SUCCESS -> IDLE via reset()

Only one request is in flight at a time; submit() is ignored while one is.
No client-side timeout is applied.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from career_advisor.client.views import LoadingView, ResultsView
from career_advisor.config import settings
from career_advisor.schemas.career import CareerProfile, CareerRecommendations

logger = logging.getLogger(__name__)

FIELD_NAMES = ("interests", "degree", "cgpa", "careerGoal")

GENERIC_FAILURE_TITLE = "Something went wrong"
GENERIC_FAILURE_DESCRIPTION = "Please try again later."
ERROR_TITLE = "Error"


class FormState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Notification:
    """A transient, non-blocking message (toast) for the user."""
    title: str
    description: str
    variant: str = "destructive"


def _empty_values() -> Dict[str, Any]:
    return {"interests": "", "degree": "", "cgpa": None, "careerGoal": ""}


class CareerAdvisorFormController:
    """
    Drives the career advisor form from input to rendered results.

    Args:
        endpoint_url: Where to POST the profile (defaults to
            settings.CAREER_ADVISOR_URL)
        http_client: Optional client to reuse; the caller keeps ownership
        on_notify: Optional callback invoked with every Notification
    """

    def __init__(
        self,
        endpoint_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        on_notify: Optional[Callable[[Notification], None]] = None,
    ):
        self.endpoint_url = endpoint_url or settings.CAREER_ADVISOR_URL
        self._http_client = http_client
        self._on_notify = on_notify

        self.values: Dict[str, Any] = _empty_values()
        self.field_errors: Dict[str, str] = {}
        self.results: Optional[CareerRecommendations] = None
        self.notifications: List[Notification] = []
        self.state = FormState.IDLE

    # ------------------------------------------------------------------
    # Form fields
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: Any) -> None:
        """Update one field; clears that field's inline error."""
        if name not in self.values:
            raise KeyError(f"Unknown form field: {name}")
        self.values[name] = value
        self.field_errors.pop(name, None)

    @property
    def is_dirty(self) -> bool:
        return self.values != _empty_values()

    @property
    def is_loading(self) -> bool:
        return self.state is FormState.SUBMITTING

    @property
    def can_reset(self) -> bool:
        """The reset action is offered once there is something to clear."""
        return self.results is not None or self.is_dirty

    @property
    def view(self) -> Union[LoadingView, ResultsView, None]:
        if self.state is FormState.SUBMITTING:
            return LoadingView()
        if self.state is FormState.SUCCESS and self.results is not None:
            return ResultsView.from_recommendations(self.results)
        return None

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> Dict[str, str]:
        """
        Validate the current values.

        Returns:
            Mapping of field name to its first error message (empty when the
            form is valid). Also stored on `field_errors`.
        """
        self.field_errors = self._collect_errors()[1]
        return self.field_errors

    def _collect_errors(self):
        try:
            profile = CareerProfile.model_validate(self.values)
        except ValidationError as e:
            errors: Dict[str, str] = {}
            for error in e.errors():
                field_name = str(error["loc"][0]) if error["loc"] else "form"
                errors.setdefault(field_name, error["msg"])
            return None, errors
        return profile, {}

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    async def submit(self) -> Optional[CareerRecommendations]:
        """
        Validate and submit the profile.

        Returns:
            The recommendations on success, otherwise None (validation
            blocked the request, a request was already in flight, or the
            request failed and a notification was raised).
        """
        if self.state is FormState.SUBMITTING:
            logger.debug("Submit ignored: a request is already in flight")
            return None

        profile, errors = self._collect_errors()
        self.field_errors = errors
        if profile is None:
            logger.info(f"Submit blocked by validation: fields={sorted(errors)}")
            return None

        self.state = FormState.SUBMITTING
        self.results = None

        try:
            return await self._submit_profile(profile)
        finally:
            if self.state is FormState.SUBMITTING:
                self.state = FormState.IDLE

    async def _submit_profile(self, profile: CareerProfile) -> Optional[CareerRecommendations]:
        try:
            response = await self._post(profile.model_dump(by_alias=True))
        except httpx.HTTPError as e:
            logger.error(f"Career advisor request failed: {type(e).__name__}: {e}")
            return self._fail(GENERIC_FAILURE_TITLE, GENERIC_FAILURE_DESCRIPTION)

        try:
            data = response.json()
        except ValueError:
            data = None

        if not response.is_success:
            message = None
            if isinstance(data, dict) and data.get("error"):
                message = str(data["error"])
            logger.warning(f"Career advisor returned status {response.status_code}")
            return self._fail(
                ERROR_TITLE,
                message or f"Request failed with status {response.status_code}",
            )

        if isinstance(data, dict) and data.get("error"):
            return self._fail(ERROR_TITLE, str(data["error"]))

        try:
            results = CareerRecommendations.model_validate(data)
        except ValidationError as e:
            logger.error(f"Career advisor returned an unexpected body: {e.errors()}")
            return self._fail(ERROR_TITLE, "Received an unexpected response. Please try again.")

        self.results = results
        self.state = FormState.SUCCESS
        logger.info("Career recommendations received")
        return results

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(self.endpoint_url, json=payload)
        async with httpx.AsyncClient(timeout=None) as client:
            return await client.post(self.endpoint_url, json=payload)

    def _fail(self, title: str, description: str) -> None:
        self.state = FormState.FAILED
        self._notify(Notification(title=title, description=description))
        # Form values stay in place for correction or retry
        self.state = FormState.IDLE
        return None

    def _notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if self._on_notify is not None:
            self._on_notify(notification)

    def reset(self) -> None:
        """Clear every field and any displayed results."""
        if self.state is FormState.SUBMITTING:
            logger.debug("Reset ignored: a request is in flight")
            return
        self.values = _empty_values()
        self.field_errors = {}
        self.results = None
        self.state = FormState.IDLE
