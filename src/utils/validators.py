"""Argument validation utilities."""

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from src.utils.exceptions import MissingArgumentError

logger = logging.getLogger("workdate")


def is_present(value: Any) -> bool:
    """Check if an argument value counts as supplied.

    None, empty string, False and NaN are missing. Zero is a valid value.

    Args:
        value: Argument value to check.

    Returns:
        True if the value is present.
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, float) and math.isnan(value):
        return False
    return True


def merge_options(
    defaults: Mapping[str, Any],
    options: Mapping[str, Any] | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Merge caller options over a set of defaults.

    Args:
        defaults: Default value for every known parameter.
        options: Options mapping supplied by the caller.
        **overrides: Keyword options, applied last.

    Returns:
        New dict with the merged parameters.
    """
    params = dict(defaults)
    if options:
        params.update(options)
    params.update(overrides)
    return params


def validate_required_arguments(params: Mapping[str, Any], required: Sequence[str]) -> None:
    """Validate that every required parameter is present.

    Args:
        params: Merged parameters.
        required: Names of the required parameters.

    Raises:
        MissingArgumentError: If any required parameter is missing.
    """
    missing = [key for key in required if not is_present(params.get(key))]

    if missing:
        logger.debug(f"Missing required arguments: {', '.join(missing)}")
        raise MissingArgumentError(missing)
