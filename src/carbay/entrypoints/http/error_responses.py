"""REST API error response models.

Documents the error body every route returns (see exception_handlers).
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error, as reported for invalid listings and queries."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "price",
                "message": "Must be a whole number: abc",
                "code": "INVALID_INTEGER",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {"detail": "Car with identifier 'user-1' not found", "code": "NOT_FOUND"}

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "brand", "message": "Is required", "code": "REQUIRED"},
                    {"field": "year", "message": "Must be a whole number: 20x9", "code": "INVALID_INTEGER"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Listing with identifier 'user-1' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {"field": "brand", "message": "Is required", "code": "REQUIRED"},
                        {
                            "field": "year",
                            "message": "Must be a whole number: 20x9",
                            "code": "INVALID_INTEGER",
                        },
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Car not found"},
    422: {"model": ErrorResponse, "description": "Validation error"},
}
