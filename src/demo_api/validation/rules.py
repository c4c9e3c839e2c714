"""Validation rules.

Each validator is a callable with the signature::

    def rule(value: Any) -> str | None:
        '''Return an error message, or None if valid.'''
"""

from collections.abc import Callable
from typing import Any, TypeAlias

Validator: TypeAlias = Callable[[Any], str | None]


def required(value: Any) -> str | None:
    """Field must be present and truthy.

    Missing keys, ``null``, ``""``, ``0``, ``false`` and empty containers
    all count as missing. Whitespace-only strings are kept as given.
    """
    if not value:
        return "This field is required"
    return None
