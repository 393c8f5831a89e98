"""
Configuration module for the Career Advisor backend.

Loads environment variables and validates required settings.
"""
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # AI Gateway (OpenAI-compatible chat completions endpoint)
    AI_GATEWAY_URL: str = os.getenv(
        "AI_GATEWAY_URL",
        "https://ai.gateway.lovable.dev/v1/chat/completions"
    )
    AI_MODEL: str = os.getenv("AI_MODEL", "google/gemini-3-flash-preview")
    AI_GATEWAY_TIMEOUT_SECONDS: float = float(
        os.getenv("AI_GATEWAY_TIMEOUT_SECONDS", "60")
    )

    # The credential is read at request time so a missing key fails the
    # request instead of the process.
    @property
    def AI_GATEWAY_API_KEY(self) -> str:
        """Get the AI gateway bearer credential from the environment."""
        return os.getenv("AI_GATEWAY_API_KEY", "")

    # Where the client form controller submits profiles
    CAREER_ADVISOR_URL: str = os.getenv(
        "CAREER_ADVISOR_URL",
        "http://localhost:8000/career-advisor"
    )

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def validate(self) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "AI_GATEWAY_API_KEY": self.AI_GATEWAY_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import.
# Skip validation during tests or when importing for introspection.
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # The credential is also checked per request, so only production
        # refuses to start without it.
        if settings.is_production():
            raise
        print(f"⚠️  Warning: {e}")
        print("   Recommendation requests will fail until you configure your .env file.")
