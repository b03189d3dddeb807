"""
ⒸAngelaMos | 2025
errors.py
"""

from pydantic import Field

from socialhub.schemas.base import BaseSchema


class ErrorDetail(BaseSchema):
    """
    Standard error response format
    """
    detail: str = Field(..., description = "Human readable error message")
    type: str = Field(..., description = "Exception class name")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "detail": "You are not logged in! Please log in to get access.",
                    "type": "AuthenticationError"
                }
            ]
        }
    }
