"""Tests for demo_api.validation: rules and validate()."""

import pytest

from demo_api.validation import ValidationResult, required, validate


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", 0, False, [], {}])
    def test_falsy_values_are_missing(self, value: object) -> None:
        assert required(value) == "This field is required"

    @pytest.mark.parametrize("value", ["Bob", " ", 7, ["x"]])
    def test_truthy_values_pass(self, value: object) -> None:
        assert required(value) is None


class TestValidate:
    RULES = {"name": [required], "email": [required]}

    def test_valid(self) -> None:
        result = validate({"name": "Bob", "email": "bob@example.com", "x": 1}, self.RULES)
        assert result
        assert result.data == {"name": "Bob", "email": "bob@example.com"}
        assert result.errors == {}

    def test_missing_field(self) -> None:
        result = validate({"name": "Invalid"}, self.RULES)
        assert not result
        assert result.errors == {"email": ["This field is required"]}
        assert result.data == {}

    def test_null_and_empty(self) -> None:
        result = validate({"name": None, "email": ""}, self.RULES)
        assert set(result.errors) == {"name", "email"}

    def test_non_mapping_has_no_fields(self) -> None:
        result = validate(["name", "email"], self.RULES)  # type: ignore[arg-type]
        assert set(result.errors) == {"name", "email"}

    def test_stops_at_first_failure(self) -> None:
        calls: list[object] = []

        def spy(value: object) -> None:
            calls.append(value)

        result = validate({}, {"name": [required, spy]})
        assert not result
        assert calls == []


class TestValidationResult:
    def test_default_is_valid(self) -> None:
        assert ValidationResult().is_valid
        assert bool(ValidationResult()) is True
