"""Path parameter converters for typed segments like ``{id:int}``."""

import re

# (regex_pattern, python_type) for each supported converter.
# Digits are ASCII only: int() also accepts "1_000", "+5" and non-Latin digits.
CONVERTERS: dict[str, tuple[str, type]] = {
    "str": (r"[^/]+", str),
    "int": (r"-?[0-9]+", int),
    "float": (r"-?[0-9]+(?:\.[0-9]+)?", float),
}


def compile_converter(param_type: str) -> re.Pattern[str]:
    """Return the segment regex for *param_type*, meant for ``fullmatch``.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    pattern, _ = CONVERTERS[param_type]
    return re.compile(pattern)


def converter_for(annotation: object) -> str | None:
    """Name of the converter whose type is *annotation*, if any."""
    for name, (_, target_type) in CONVERTERS.items():
        if target_type is annotation:
            return name
    return None
