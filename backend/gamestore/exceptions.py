"""
GameStore Backend - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a message and optional context dict. Global
       exception handlers (registered in main.py) translate them into HTTP
       responses with the right status code.
Who:   Raised by services and stores; caught by the global handlers.

Exception Hierarchy:
    GameStoreError (base)
    ├── ValidationError      → 400 Bad Request (field-level errors)
    ├── InvalidGenreError    → 400 Bad Request (unresolved genre reference)
    ├── NotFoundError        → 404 Not Found (empty body)
    └── DatabaseError        → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class GameStoreError(Exception):
    """
    Base exception for all GameStore application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not always returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(GameStoreError):
    """
    Raised when a request body fails field validation.

    What:    Carries every field-level error found in the body, not just the first.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "One or more fields are invalid",
            "details": {"errors": [{"field": "price", "message": "..."}]}
        }
    """

    def __init__(
        self,
        errors: List[Dict[str, str]],
        message: str = "One or more fields are invalid",
    ):
        super().__init__(message=message, context={"errors": errors})
        self.errors = errors


class InvalidGenreError(GameStoreError):
    """
    Raised when a create/update body references a genre that does not exist.

    HTTP:    400 Bad Request, message "Invalid genre id: {id}"
    """

    def __init__(self, genre_id: int):
        super().__init__(
            message=f"Invalid genre id: {genre_id}",
            context={"genre_id": genre_id},
        )
        self.genre_id = genre_id


class NotFoundError(GameStoreError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PUT/DELETE /games/{id} with an id the store does not hold.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(GameStoreError):
    """
    Raised when database operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, locked database.
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    exception type is kept in the context and logged server-side.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
