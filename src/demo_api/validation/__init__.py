"""Body validation: composable rules, clean results.

Usage::

    from demo_api.validation import validate, required

    body = await request.json()
    result = validate(body, {"name": [required], "email": [required]})
    if not result:
        return {"errors": result.errors}, 400
    # result.data has the validated values
"""

from collections.abc import Mapping
from typing import Any

from demo_api.validation.result import ValidationResult
from demo_api.validation.rules import Validator, required

__all__ = ["ValidationResult", "Validator", "required", "validate"]


def validate(
    data: Mapping[str, Any],
    rules: dict[str, list[Validator]],
) -> ValidationResult:
    """Validate *data* against a set of rules.

    Args:
        data: Any mapping of field names to values, typically a decoded
            JSON object. A non-mapping (a JSON array or scalar) is treated
            as having no fields.
        rules: Field name to a list of validators. Each validator returns
            an error message on failure or ``None`` on success.

    Returns:
        A ``ValidationResult``. Validation of a field stops at its first
        failing rule.
    """
    if not isinstance(data, Mapping):
        data = {}

    errors: dict[str, list[str]] = {}
    cleaned: dict[str, Any] = {}

    for field_name, validators in rules.items():
        value = data.get(field_name)
        for validator in validators:
            error = validator(value)
            if error is not None:
                errors[field_name] = [error]
                break
        else:
            cleaned[field_name] = value

    return ValidationResult(data=cleaned if not errors else {}, errors=errors)
