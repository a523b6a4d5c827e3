from typing import Any


class PaginationError(Exception):
    """Base pagination error with consistent schema."""

    def __init__(
        self,
        message: str,
        code: str = "PAGINATION_ERROR",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)


class InvalidPaginationArgumentError(PaginationError, ValueError):
    """Offset, limit or delivered count rejected before any fetch happens."""

    def __init__(self, parameters: dict[str, Any], message: str):
        super().__init__(message, code="INVALID_ARGUMENT", details={"parameters": dict(parameters)})

    @classmethod
    def for_invalid_parameter(cls, name: str, value: Any, description: str) -> "InvalidPaginationArgumentError":
        message = (
            f"{name} must be greater than or equal to zero, got {value}. "
            f"Use a non-negative integer to specify the {description}."
        )
        return cls({name: value}, message)

    @classmethod
    def for_non_integer(cls, name: str, value: Any, description: str) -> "InvalidPaginationArgumentError":
        message = (
            f"{name} must be an integer, got {type(value).__name__}. "
            f"Use a non-negative integer to specify the {description}."
        )
        return cls({name: value}, message)

    @classmethod
    def for_invalid_zero_limit(cls, offset: int, limit: int, delivered: int) -> "InvalidPaginationArgumentError":
        message = (
            "Zero limit is only allowed when both offset and delivered are also zero "
            f"(current: offset={offset}, limit={limit}, delivered={delivered}). "
            "Zero limit marks the start of pagination and fetches nothing. "
            "Pass a positive limit to fetch items."
        )
        return cls({"offset": offset, "limit": limit, "delivered": delivered}, message)

    @property
    def parameters(self) -> dict[str, Any]:
        return self.details["parameters"]

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)


class InvalidPaginationResultError(PaginationError, TypeError):
    """A source or callback produced something other than an iterator of items."""

    def __init__(self, message: str, expected_type: str, actual_type: str, context: str = ""):
        super().__init__(
            message,
            code="INVALID_RESULT",
            details={"expected_type": expected_type, "actual_type": actual_type, "context": context},
        )

    @classmethod
    def for_invalid_callback_result(
        cls, result: Any, expected_type: str, context: str = ""
    ) -> "InvalidPaginationResultError":
        actual_type = type(result).__name__
        prefix = f"({context}) " if context else ""
        return cls(
            f"Callback {prefix}must return {expected_type}, got {actual_type}",
            expected_type,
            actual_type,
            context,
        )

    @classmethod
    def for_invalid_source_result(
        cls, result: Any, expected_type: str, source: Any
    ) -> "InvalidPaginationResultError":
        actual_type = type(result).__name__
        context = f"{type(source).__name__}.fetch"
        return cls(
            f"Source {context} must return {expected_type}, got {actual_type}",
            expected_type,
            actual_type,
            context,
        )
