"""
Logging utilities for the Career Advisor backend.

Provides standardized logger configuration following privacy rules.

CRITICAL PRIVACY RULES:
- NEVER log the AI gateway credential or any Authorization header
- NEVER log a student's full interests or career goal text
- NEVER return upstream error bodies to the caller (log them here instead)

Acceptable logging:
- High-level events (e.g., "career-advisor invoked", "AI gateway responded")
- Non-sensitive metadata (e.g., "degree='Computer Science'", field lengths)
- Upstream status codes and truncated upstream error bodies
"""

import logging
from typing import Optional


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to INFO)

    Returns:
        Configured logger instance

    Usage:
        >>> from career_advisor.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("High-level event occurred")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = logging.INFO

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        # Records stop here so the root handler does not print them again
        logger.propagate = False

    return logger
