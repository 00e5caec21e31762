"""
Restaurant API — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for the failure kinds the API
       distinguishes.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by the RPC registry and services; caught by global handlers.

Exception Hierarchy:
    RestaurantError (base)
    ├── ValidationError            → 400 Bad Request (client can fix)
    ├── NotFoundError              → 404 Not Found (unknown procedure)
    ├── MethodNotAllowedError      → 405 Method Not Allowed
    └── ReferentialIntegrityError  → 422 Unprocessable Entity

    A missing menu item, order, reservation or testimonial is NOT an
    exception: id lookups and updates return None and the RPC result is
    null. Database failures surface as SQLAlchemyError, unchanged.
"""

from typing import Any, Dict, Iterable, List, Optional


class RestaurantError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional detail; returned as `details` for client errors
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestaurantError):
    """
    Raised when procedure input fails validation.

    When:    Missing/invalid field, out-of-range number, unknown enum value,
             malformed JSON body.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "Invalid input for procedure 'createMenuItem'",
            "details": {"procedure": "createMenuItem",
                        "errors": [{"loc": ["price"], "msg": "..."}]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RestaurantError):
    """
    Raised when a requested route-level resource does not exist.

    When:    A call names a procedure the router does not register.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class MethodNotAllowedError(RestaurantError):
    """
    Raised when a procedure is called with the wrong HTTP verb.

    When:    A query is POSTed or a mutation is requested with GET.
    HTTP:    405 Method Not Allowed (Allow header carries the right verb)
    """

    def __init__(
        self,
        procedure: str,
        kind: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.allowed_method = "GET" if kind == "query" else "POST"
        message = (
            f"Procedure '{procedure}' is a {kind}; call it with {self.allowed_method}"
        )
        ctx = context or {}
        ctx.update(procedure=procedure, kind=kind)
        super().__init__(message=message, context=ctx)


class ReferentialIntegrityError(RestaurantError):
    """
    Raised when an order references menu items that do not exist.

    When:    create_order() finds one or more line-item ids missing from the
             catalog. Nothing is persisted.
    HTTP:    422 Unprocessable Entity

    Attributes:
        missing_ids: Sorted, de-duplicated list of the unknown menu item ids
    """

    def __init__(
        self,
        missing_ids: Iterable[int],
        context: Optional[Dict[str, Any]] = None,
    ):
        self.missing_ids: List[int] = sorted(set(missing_ids))
        message = (
            "One or more menu items do not exist: "
            + ", ".join(str(i) for i in self.missing_ids)
        )
        ctx = context or {}
        ctx["missing_menu_item_ids"] = self.missing_ids
        super().__init__(message=message, context=ctx)
