"""Validation result: immutable container for validated data or errors."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """The outcome of validating data against a set of rules.

    The result is falsy when invalid, so you can write::

        result = validate(body, rules)
        if not result:
            return {"errors": result.errors}, 400

    ``data`` holds the validated values (only populated when valid).
    ``errors`` maps field names to lists of error messages.
    """

    data: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid
