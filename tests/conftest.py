"""
Pytest configuration for Career Advisor tests.

Sets up test environment and global fixtures.
"""
import copy
import json
import os
from typing import Any, Callable, Dict, Optional
from unittest.mock import patch

import httpx
import pytest

# Disable config validation during tests
# This allows tests to run without requiring real environment variables
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("AI_GATEWAY_API_KEY", "test-gateway-api-key")


VALID_RECOMMENDATIONS: Dict[str, Any] = {
    "careers": [
        {
            "title": "Data Scientist",
            "description": "Builds predictive models; fits your goal and programming background.",
            "relevance": "High",
        },
        {
            "title": "Machine Learning Engineer",
            "description": "Deploys models to production using your backend skills.",
            "relevance": "Medium",
        },
        {
            "title": "Backend Developer",
            "description": "Designs APIs with FastAPI and Node.js.",
            "relevance": "Low",
        },
    ],
    "skills": ["Python", "Statistics", "SQL", "Pandas", "scikit-learn", "Docker"],
    "advice": (
        "Your CGPA and backend experience are a strong base. "
        "Focus on statistics and a couple of end-to-end data projects. "
        "Publish them on GitHub and look for analytics internships."
    ),
}


@pytest.fixture
def valid_recommendations() -> Dict[str, Any]:
    """A complete Recommendations object as the model would produce it."""
    return copy.deepcopy(VALID_RECOMMENDATIONS)


@pytest.fixture
def profile_payload() -> Dict[str, Any]:
    """Wire-format profile from the end-to-end scenario."""
    return {
        "interests": "fastapi, nodejs",
        "degree": "Computer Science",
        "cgpa": 3.5,
        "careerGoal": "become a data scientist",
    }


def gateway_tool_call_response(arguments: Any) -> Dict[str, Any]:
    """Build a chat-completion body whose first choice carries one tool call."""
    if not isinstance(arguments, str):
        arguments = json.dumps(arguments)
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "tool_calls",
                "message": {
                    "role": "assistant",
                    "content": None,
                    "tool_calls": [
                        {
                            "id": "call_1",
                            "type": "function",
                            "function": {
                                "name": "provide_recommendations",
                                "arguments": arguments,
                            },
                        }
                    ],
                },
            }
        ],
    }


class GatewayStub:
    """
    Fake AI gateway served through httpx.MockTransport.

    Records every request so tests can assert on the outbound payload.
    """

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json_body: Optional[Dict[str, Any]] = gateway_tool_call_response(VALID_RECOMMENDATIONS)
        self.text_body: Optional[str] = None
        self.error: Optional[Exception] = None

    def reply(self, status_code: int = 200, json_body=None, text_body: Optional[str] = None):
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text_body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def client_factory(self) -> Callable[[], httpx.AsyncClient]:
        return lambda: httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def gateway():
    """
    Replace the AI gateway with a GatewayStub for the duration of a test.

    Patches the service's client factory, so both direct service calls and
    requests through the FastAPI app hit the stub.
    """
    stub = GatewayStub()
    with patch(
        "career_advisor.services.career_service._get_http_client",
        side_effect=stub.client_factory(),
    ):
        yield stub


@pytest.fixture
def tool_call_response() -> Callable[[Any], Dict[str, Any]]:
    """Factory for chat-completion bodies carrying a tool call."""
    return gateway_tool_call_response
