"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, as reported by lead forms and filters."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "email",
                "message": "Please enter a valid email",
                "code": "INVALID_EMAIL",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Vehicle with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "phone", "message": "Please enter a valid phone number", "code": "TOO_SHORT"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Vehicle with identifier '42' not found", "code": "NOT_FOUND"},
                {
                    "detail": "quantity must be between 1 and 5, got 6",
                    "code": "OUT_OF_RANGE",
                },
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "price_min",
                            "message": "Must be less than or equal to price_max",
                            "code": "INVALID_RANGE",
                        }
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Resource not found"},
    409: {"model": ErrorResponse, "description": "Request conflicts with current state"},
    422: {"model": ErrorResponse, "description": "Validation error"},
}
