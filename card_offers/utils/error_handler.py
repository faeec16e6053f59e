"""
Centralized error handling for the card offers engine.

Per-fragment problems never abort a batch: a fragment that cannot be matched
or priced degrades to the unmatched list. Only batch-level preconditions
(an empty batch, a broken catalog or bad configuration) are raised to callers.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


class CardOffersError(Exception):
    """Base exception class for all card offers errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(CardOffersError):
    """Raised when settings or input files are invalid."""
    pass


class CatalogError(CardOffersError):
    """Raised when the catalog cannot be loaded or holds an invalid entry."""
    pass


class InputEmptyError(CardOffersError):
    """Raised when a batch has no usable fragments after trimming."""
    pass


class UnsupportedConditionError(CardOffersError):
    """Raised when an entry is priced at a condition it does not support."""
    pass


class OCRError(CardOffersError):
    """Raised when OCR provider output cannot be turned into fragments."""
    pass


class WriterError(CardOffersError):
    """Raised when exporting results fails."""
    pass


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    operation: str
    module: str
    function: str
    input_data: Optional[Dict[str, Any]] = None


def handle_error(
    error: Exception,
    context: ErrorContext,
    logger: Any,
    reraise: bool = True,
    default_return: Any = None
) -> Any:
    """
    Log an error with its context, then re-raise it or return a fallback.

    Args:
        error: The exception that occurred
        context: Where the error occurred
        logger: structlog (or stdlib-compatible) logger
        reraise: Whether to re-raise the exception after logging
        default_return: Value to return if not re-raising

    Returns:
        The default_return value if not re-raising

    Raises:
        The original exception if reraise is True
    """
    error_msg = f"Error in {context.module}.{context.function} during {context.operation}"

    if isinstance(error, CardOffersError):
        error_msg += f": {error.message}"
    else:
        error_msg += f": {error}"

    logger.error(
        error_msg,
        error_type=type(error).__name__,
        operation=context.operation,
        error_module=context.module,
        error_function=context.function,
        input_data=context.input_data,
        details=getattr(error, "details", None),
    )

    if reraise:
        raise error

    return default_return


def safe_execute(
    func,
    *args,
    context: ErrorContext,
    logger: Any,
    default_return: Any = None,
    **kwargs
) -> Any:
    """
    Run ``func``; on any exception log it with ``context`` and return ``default_return``.
    """
    try:
        return func(*args, **kwargs)
    except Exception as e:
        return handle_error(e, context, logger, reraise=False, default_return=default_return)


def validate_required_fields(data: Dict[str, Any], required_fields: list, context: ErrorContext) -> None:
    """
    Validate that required fields are present in data.

    Raises:
        CatalogError: If required fields are missing
    """
    missing_fields = [field for field in required_fields if field not in data or data[field] is None]

    if missing_fields:
        raise CatalogError(
            f"Missing required fields: {missing_fields}",
            details={
                "missing_fields": missing_fields,
                "available_fields": list(data.keys()),
                "operation": context.operation,
            }
        )
