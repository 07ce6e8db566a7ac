"""Argument validation shared across the extensions."""

from __future__ import annotations

from typing import TypeVar

from fs_extensions.errors import InvalidArgumentError

T = TypeVar("T")


def require(value: T | None, name: str) -> T:
    """Return ``value``, rejecting None.

    Args:
        value: The argument to check.
        name: Parameter name, used in the error message.

    Returns:
        The value unchanged.

    Raises:
        InvalidArgumentError: If value is None.

    Example:
        >>> require("x", "path")
        'x'
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")
    return value
