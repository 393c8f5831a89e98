"""
Error taxonomy for the career advisor relay.

Every exception carries the message shown to the caller and the HTTP status
it maps to. Upstream details never go into `message`; they are logged by
the service before raising.
"""


class CareerAdvisorError(Exception):
    """Base error for a failed recommendation request (500 by default)."""

    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(CareerAdvisorError):
    """The AI gateway credential is not configured."""

    default_message = "AI service is not configured"


class UpstreamRateLimitError(CareerAdvisorError):
    """The AI gateway answered 429."""

    status_code = 429
    default_message = "Rate limit exceeded. Please try again later."


class UpstreamCreditsExhaustedError(CareerAdvisorError):
    """The AI gateway answered 402."""

    status_code = 402
    default_message = "AI usage limit reached. Please add credits."


class UpstreamGatewayError(CareerAdvisorError):
    """Any other non-2xx answer or a transport failure talking to the gateway."""

    default_message = "AI gateway error"


class MissingToolCallError(CareerAdvisorError):
    """The gateway answered 2xx without a tool call."""

    default_message = "No tool call in AI response"


class MalformedRecommendationsError(CareerAdvisorError):
    """The tool call arguments are not a complete Recommendations object."""

    default_message = "Malformed recommendations in AI response"
