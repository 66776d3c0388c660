"""Domain exceptions for the REST web services layer.

Defines domain-level exceptions for lookup, registration, and search
resolution failures. These exceptions are independent of the HTTP shell;
core.exception_handlers maps them to HTTP responses.
"""

from typing import Any, Sequence


class RestWebServiceException(Exception):
    """Base exception for all REST web service errors.

    All custom exceptions inherit from this class so the HTTP shell can map
    them uniformly using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. resource, search_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP shell."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RestWebServiceException):
    """Raised when input validation fails (e.g. empty id or bad representation)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class UnknownResourceException(RestWebServiceException):
    """Raised when no resource is registered for a name or any ancestor of a class."""

    def __init__(self, resource: str) -> None:
        """Initialize with the resource name or class name that was looked up.

        Args:
            resource: Resource name, or qualified class name for class lookups.
        """
        super().__init__(
            f"Unknown resource: {resource}",
            "UNKNOWN_RESOURCE",
            {"resource": resource},
        )


class ObjectNotFoundException(RestWebServiceException):
    """Raised when a resource adapter cannot find the requested object."""

    def __init__(self, resource: str, uuid: str) -> None:
        super().__init__(
            f"Object not found: {resource} {uuid}",
            "OBJECT_NOT_FOUND",
            {"resource": resource, "uuid": uuid},
        )


class DuplicateResourceException(RestWebServiceException):
    """Raised when a resource name or supported class is registered twice."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, "DUPLICATE_RESOURCE", details)


class DuplicateSearchHandlerException(RestWebServiceException):
    """Raised when two search handlers for one resource share an id."""

    def __init__(self, resource: str, search_id: str) -> None:
        super().__init__(
            f"Two search handlers for the same resource '{resource}' "
            f"must not have the same id '{search_id}'",
            "DUPLICATE_SEARCH_HANDLER",
            {"resource": resource, "search_id": search_id},
        )


class InvalidSearchException(RestWebServiceException):
    """Raised when a search request cannot be resolved to a single handler.

    Caller input error; resubmitting the same request fails the same way.
    """

    def __init__(
        self,
        message: str,
        error_code: str = "INVALID_SEARCH",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class UnknownSearchIdException(InvalidSearchException):
    """Raised when an explicit search id matches no handler of the resource."""

    def __init__(self, search_id: str, resource: str) -> None:
        """Initialize with the offending id and target resource.

        Args:
            search_id: Value of the selector parameter.
            resource: Resource name the search was addressed to.
        """
        super().__init__(
            f"The search with id '{search_id}' for '{resource}' resource is not recognized",
            "UNKNOWN_SEARCH_ID",
            {"resource": resource, "search_id": search_id},
        )


class AmbiguousSearchException(InvalidSearchException):
    """Raised when several equally specific handlers accept the supplied parameters."""

    def __init__(
        self,
        resource: str,
        candidates: Sequence[str],
        selector_parameter: str = "s",
    ) -> None:
        """Initialize with the candidate ids the caller can choose from.

        Args:
            resource: Resource name the search was addressed to.
            candidates: Ids of the equally specific handlers.
            selector_parameter: Name of the request parameter used to pick one.
        """
        options = " or ".join(f"{selector_parameter}={c}" for c in candidates)
        super().__init__(
            f"The search is ambiguous. Please specify {options}",
            "AMBIGUOUS_SEARCH",
            {"resource": resource, "candidates": list(candidates)},
        )


class ResourceDeletionException(RestWebServiceException):
    """Raised when the domain service refuses to delete or purge an object."""

    def __init__(self, resource: str, uuid: str, reason: str) -> None:
        super().__init__(
            f"Unable to delete {resource} {uuid}: {reason}",
            "RESOURCE_DELETION_ERROR",
            {"resource": resource, "uuid": uuid, "reason": reason},
        )
