"""
Tests for the career advisor form controller.

Tests cover:
- Local validation blocks submission with field-specific messages
- State machine: IDLE -> SUBMITTING -> SUCCESS / FAILED -> IDLE
- Error notifications: transport failure, non-2xx, `error` field in body
- Reset clears fields, results and field errors, and waits out an in-flight request
- End-to-end: controller -> FastAPI app -> stubbed AI gateway
"""

import json

import httpx
import pytest

from career_advisor.client.form_controller import (
    CareerAdvisorFormController,
    FormState,
    Notification,
)
from career_advisor.client.views import LoadingView, ResultsView
from career_advisor.main import app

ENDPOINT = "http://advisor.test/career-advisor"


def _fill(controller, values):
    for name, value in values.items():
        controller.set_field(name, value)


def _controller_for(handler, **kwargs):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CareerAdvisorFormController(endpoint_url=ENDPOINT, http_client=client, **kwargs)


class TestValidation:
    """Local validation before any request is issued."""

    @pytest.mark.asyncio
    async def test_valid_profile_issues_request(self, profile_payload, valid_recommendations):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json=valid_recommendations)

        controller = _controller_for(handler)
        _fill(controller, profile_payload)

        await controller.submit()

        assert len(requests) == 1
        assert requests[0].url == ENDPOINT
        assert controller.field_errors == {}

    @pytest.mark.asyncio
    async def test_request_body_uses_wire_names(self, profile_payload, valid_recommendations):
        bodies = []

        def handler(request):
            bodies.append(request.content)
            return httpx.Response(200, json=valid_recommendations)

        controller = _controller_for(handler)
        _fill(controller, dict(profile_payload, cgpa="3.5"))

        await controller.submit()

        assert json.loads(bodies[0]) == profile_payload

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field, value, message",
        [
            ("interests", "", "Please enter your interests"),
            ("interests", "x" * 501, "Interests must be at most 500 characters"),
            ("degree", "", "Please select your degree"),
            ("cgpa", "4.5", "CGPA must be at most 4.0"),
            ("cgpa", "-1", "CGPA must be at least 0.0"),
            ("careerGoal", " ", "Please enter your career goal"),
        ],
    )
    async def test_invalid_field_blocks_submission(self, profile_payload, field, value, message):
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, json={})

        controller = _controller_for(handler)
        _fill(controller, profile_payload)
        controller.set_field(field, value)

        result = await controller.submit()

        assert result is None
        assert requests == []
        assert controller.field_errors == {field: message}
        assert controller.state is FormState.IDLE
        assert controller.notifications == []

    def test_empty_form_reports_every_field(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)

        errors = controller.validate()

        assert errors == {
            "interests": "Please enter your interests",
            "degree": "Please select your degree",
            "cgpa": "Please enter your CGPA",
            "careerGoal": "Please enter your career goal",
        }

    def test_editing_field_clears_its_error(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)
        controller.validate()

        controller.set_field("degree", "Physics")

        assert "degree" not in controller.field_errors
        assert "interests" in controller.field_errors

    def test_cgpa_too_large_for_float_blocks(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)
        controller.set_field("cgpa", 10**400)

        errors = controller.validate()

        assert errors["cgpa"] == "CGPA must be a number"

    def test_unknown_field_rejected(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)

        with pytest.raises(KeyError):
            controller.set_field("gpa", 3.0)


class TestSubmission:
    """State transitions and notifications around a request."""

    @pytest.mark.asyncio
    async def test_loading_state_while_in_flight(self, profile_payload, valid_recommendations):
        observed = {}

        async def handler(request):
            observed["state"] = controller.state
            observed["view"] = controller.view
            # A second submit while loading is ignored
            observed["second"] = await controller.submit()
            return httpx.Response(200, json=valid_recommendations)

        controller = _controller_for(handler)
        _fill(controller, profile_payload)

        await controller.submit()

        assert observed["state"] is FormState.SUBMITTING
        assert isinstance(observed["view"], LoadingView)
        assert observed["view"].career_placeholders == 3
        assert observed["second"] is None
        assert controller.state is FormState.SUCCESS

    @pytest.mark.asyncio
    async def test_success_renders_results(self, profile_payload, valid_recommendations):
        controller = _controller_for(
            lambda request: httpx.Response(200, json=valid_recommendations)
        )
        _fill(controller, profile_payload)

        results = await controller.submit()

        assert results is not None
        assert results.model_dump() == valid_recommendations
        view = controller.view
        assert isinstance(view, ResultsView)
        assert [card.badge for card in view.career_cards] == [
            "High Relevance", "Medium Relevance", "Low Relevance"
        ]
        assert view.skill_badges == valid_recommendations["skills"]
        assert view.advice == valid_recommendations["advice"]

    @pytest.mark.asyncio
    async def test_transport_failure_notifies_and_keeps_form(self, profile_payload):
        def handler(request):
            raise httpx.ConnectError("connection refused")

        notified = []
        controller = _controller_for(handler, on_notify=notified.append)
        _fill(controller, profile_payload)

        result = await controller.submit()

        assert result is None
        assert notified == [
            Notification(title="Something went wrong", description="Please try again later.")
        ]
        assert controller.state is FormState.IDLE
        assert controller.values == profile_payload
        assert controller.view is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, message",
        [
            (429, "Rate limit exceeded. Please try again later."),
            (402, "AI usage limit reached. Please add credits."),
            (500, "AI gateway error"),
        ],
    )
    async def test_error_status_notifies_with_server_message(
        self, profile_payload, status_code, message
    ):
        controller = _controller_for(
            lambda request: httpx.Response(status_code, json={"error": message})
        )
        _fill(controller, profile_payload)

        await controller.submit()

        assert controller.notifications == [Notification(title="Error", description=message)]
        assert controller.state is FormState.IDLE
        assert controller.results is None

    @pytest.mark.asyncio
    async def test_error_status_without_body_notifies(self, profile_payload):
        controller = _controller_for(lambda request: httpx.Response(502, text="Bad Gateway"))
        _fill(controller, profile_payload)

        await controller.submit()

        assert controller.notifications[0].description == "Request failed with status 502"

    @pytest.mark.asyncio
    async def test_error_field_in_success_body_notifies(self, profile_payload):
        controller = _controller_for(
            lambda request: httpx.Response(200, json={"error": "No tool call in AI response"})
        )
        _fill(controller, profile_payload)

        result = await controller.submit()

        assert result is None
        assert controller.notifications[0].description == "No tool call in AI response"

    @pytest.mark.asyncio
    async def test_failed_state_visible_to_notification_handler(self, profile_payload):
        states = []
        controller = _controller_for(
            lambda request: httpx.Response(429, json={"error": "slow down"}),
            on_notify=lambda notification: states.append(controller.state),
        )
        _fill(controller, profile_payload)

        await controller.submit()

        assert states == [FormState.FAILED]
        assert controller.state is FormState.IDLE

    @pytest.mark.asyncio
    async def test_resubmit_after_success_clears_previous_results(
        self, profile_payload, valid_recommendations
    ):
        responses = [
            httpx.Response(200, json=valid_recommendations),
            httpx.Response(429, json={"error": "slow down"}),
        ]
        controller = _controller_for(lambda request: responses.pop(0))
        _fill(controller, profile_payload)

        await controller.submit()
        await controller.submit()

        assert controller.results is None
        assert controller.view is None


class TestReset:
    """The reset action clears the form and the results view."""

    @pytest.mark.asyncio
    async def test_reset_after_results(self, profile_payload, valid_recommendations):
        controller = _controller_for(
            lambda request: httpx.Response(200, json=valid_recommendations)
        )
        _fill(controller, profile_payload)
        await controller.submit()
        assert controller.can_reset

        controller.reset()

        assert controller.values == {
            "interests": "", "degree": "", "cgpa": None, "careerGoal": ""
        }
        assert controller.results is None
        assert controller.view is None
        assert controller.state is FormState.IDLE
        assert not controller.can_reset

    @pytest.mark.asyncio
    async def test_reset_clears_field_errors_after_blocked_submit(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)
        controller.set_field("interests", "robotics")
        assert await controller.submit() is None
        assert controller.field_errors

        controller.reset()

        assert controller.field_errors == {}
        assert controller.state is FormState.IDLE

    @pytest.mark.asyncio
    async def test_reset_ignored_while_request_in_flight(
        self, profile_payload, valid_recommendations
    ):
        observed = {}

        def handler(request):
            controller.reset()
            observed["state"] = controller.state
            observed["values"] = dict(controller.values)
            return httpx.Response(200, json=valid_recommendations)

        controller = _controller_for(handler)
        _fill(controller, profile_payload)

        await controller.submit()

        assert observed["state"] is FormState.SUBMITTING
        assert observed["values"] == profile_payload
        assert controller.state is FormState.SUCCESS
        assert controller.values == profile_payload
        assert isinstance(controller.view, ResultsView)

    def test_reset_offered_once_form_is_dirty(self):
        controller = CareerAdvisorFormController(endpoint_url=ENDPOINT)
        assert not controller.can_reset

        controller.set_field("interests", "robotics")

        assert controller.is_dirty
        assert controller.can_reset


class TestEndToEnd:
    """Controller -> FastAPI app -> stubbed AI gateway."""

    @pytest.mark.asyncio
    async def test_scenario_renders_three_cards_skills_and_advice(
        self, gateway, profile_payload
    ):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://advisor.test") as client:
            controller = CareerAdvisorFormController(endpoint_url=ENDPOINT, http_client=client)
            _fill(controller, profile_payload)

            await controller.submit()

        view = controller.view
        assert isinstance(view, ResultsView)
        assert len(view.career_cards) == 3
        assert all(card.relevance in {"High", "Medium", "Low"} for card in view.career_cards)
        assert 5 <= len(view.skill_badges) <= 8
        assert view.advice
        assert len(gateway.requests) == 1

    @pytest.mark.asyncio
    async def test_scenario_rate_limited_shows_notification(self, gateway, profile_payload):
        gateway.reply(429, {"error": "upstream"})
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://advisor.test") as client:
            controller = CareerAdvisorFormController(endpoint_url=ENDPOINT, http_client=client)
            _fill(controller, profile_payload)

            await controller.submit()

        assert controller.notifications == [
            Notification(title="Error", description="Rate limit exceeded. Please try again later.")
        ]
        assert controller.values == profile_payload
