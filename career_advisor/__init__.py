"""Career Advisor backend: AI-powered career recommendations for students."""

__version__ = "0.1.0"
