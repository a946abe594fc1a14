"""Failures the marketplace reports to its callers.

The store and use cases raise these; the HTTP layer turns ``error_code`` into
a status (see ``STATUS_BY_ERROR_CODE``) and ``to_dict()`` into the body.
Routine misuse of the store (duplicates, a full compare set, unknown ids) is
not an error and never shows up here.
"""

from typing import Any

# One entry per rejected listing or filter field: {"field", "message", "code"}
FieldError = dict[str, str]


class DomainError(Exception):
    """Root of every marketplace failure; carries a code and loose context."""

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """
    Input the marketplace refuses to act on.

    Raised for sell and edit forms missing a brand, model, year or price, for
    a listing with a negative price or odometer reading, for a price filter
    whose minimum exceeds its maximum, and for loan terms such as a 100% down
    payment. ``errors`` lists every offending field at once, so a form can
    flag all of them in one round trip.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        self.errors: list[FieldError] | None = errors or None
        if message is None:
            message = "Validation failed" if self.errors else "Validation error"
        super().__init__(message, **context)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.errors:
            result["errors"] = self.errors
        return result


class NotFoundError(DomainError):
    """A car id that names neither a catalog car nor one of the user's listings."""

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class InternalError(DomainError):
    """Something the marketplace cannot recover from; logged in full by the HTTP layer."""

    error_code: str = "INTERNAL_ERROR"


class StoreNotInitializedError(InternalError):
    """The car store was used before it was opened, or after it was closed.

    This is a wiring mistake, never a runtime condition: callers must not
    catch it and carry on.
    """

    def __init__(self, message: str | None = None, **context: Any) -> None:
        super().__init__(message or "Car store is not initialized", **context)
