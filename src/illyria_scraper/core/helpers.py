# SPDX-License-Identifier: Apache-2.0
"""Generic helpers for cleaning loosely-typed payloads."""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


def is_undefined(value: Any) -> bool:
    """Return True for None, empty strings and empty containers.

    ``0`` and ``False`` are real values and are not undefined.
    """
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) == 0
    return False


def undefined_fields(obj: T) -> T:
    """Recursively remove undefined fields from dicts and items from lists.

    Containers are cleaned bottom-up, so a nested dict or list that ends up
    empty after cleaning is removed from its parent as well.

    Args:
        obj: Dict or list to clean. Other values are returned unchanged.

    Returns:
        A new dict or list with undefined fields removed.

    Example:
        >>> undefined_fields({"a": [], "b": None, "c": {"d": "", "e": 1}})
        {'c': {'e': 1}}
    """
    if isinstance(obj, dict):
        cleaned_dict = {}
        for key, value in obj.items():
            value = undefined_fields(value)
            if not is_undefined(value):
                cleaned_dict[key] = value
        return cleaned_dict  # type: ignore[return-value]

    if isinstance(obj, list):
        cleaned_list = []
        for item in obj:
            item = undefined_fields(item)
            if not is_undefined(item):
                cleaned_list.append(item)
        return cleaned_list  # type: ignore[return-value]

    return obj
