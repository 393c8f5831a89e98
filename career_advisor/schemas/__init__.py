"""
Pydantic schemas for API request and response validation.

The profile schema is shared with the client form controller so both sides
apply the same field rules.
"""
