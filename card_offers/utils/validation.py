"""
Input validation helpers used when loading catalog data and CLI input files.
"""

from pathlib import Path
from typing import Any, Iterable, Optional, Union

from .error_handler import CatalogError, ConfigurationError


def validate_file_path(file_path: Union[str, Path], must_exist: bool = False) -> Path:
    """
    Validate and normalize a file path.

    Raises:
        ConfigurationError: If path is invalid or the file doesn't exist when required
    """
    try:
        path = Path(file_path)

        if must_exist and not path.is_file():
            raise ConfigurationError(
                f"File does not exist: {path}",
                details={"file_path": str(path), "must_exist": must_exist}
            )

        return path.resolve()

    except ConfigurationError:
        raise
    except (TypeError, OSError) as e:
        raise ConfigurationError(
            f"Invalid file path: {file_path}",
            details={"file_path": str(file_path), "error": str(e)}
        )


def validate_numeric_range(
    value: Any,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
    field_name: str = "value"
) -> float:
    """
    Validate that ``value`` is a number within [min_value, max_value].

    Booleans are rejected even though they are ints.

    Raises:
        CatalogError: If the value is not numeric or lies outside the range
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(
            f"{field_name} must be a number, got {type(value).__name__}",
            details={"field_name": field_name, "value": value}
        )

    if min_value is not None and value < min_value:
        raise CatalogError(
            f"{field_name} {value} is below minimum {min_value}",
            details={"field_name": field_name, "value": value, "min_value": min_value}
        )

    if max_value is not None and value > max_value:
        raise CatalogError(
            f"{field_name} {value} is above maximum {max_value}",
            details={"field_name": field_name, "value": value, "max_value": max_value}
        )

    return value


def validate_enum_value(value: Any, allowed_values: Iterable[Any], field_name: str = "value") -> Any:
    """
    Validate a value is one of the allowed values.

    Raises:
        CatalogError: If value is not in the allowed list
    """
    allowed = list(allowed_values)
    if value not in allowed:
        raise CatalogError(
            f"{field_name} '{value}' is not allowed. Allowed values: {allowed}",
            details={"field_name": field_name, "value": value, "allowed_values": allowed}
        )

    return value
