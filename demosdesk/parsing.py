"""Value normalization for `DEMOSDESK_*` variables, YAML payloads, and CLI flags."""

from __future__ import annotations


_BOOLEAN_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when it is missing or blank."""

    text = "" if value is None else str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Map flag tokens such as `yes`/`off` to a bool; unknown tokens give `None`."""

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    return None if token is None else _BOOLEAN_TOKENS.get(token.lower())


def parse_optional_positive_float(value: object, field_name: str) -> float | None:
    """Parse an optional positive number of seconds.

    Blank values mean "unset" and yield `None`.

    Raises:
        ValueError: If the value is present but not a positive number.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be a positive number of seconds.")
    if isinstance(value, (int, float)):
        parsed = float(value)
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            return None
        try:
            parsed = float(normalized)
        except ValueError as exc:
            raise ValueError(f"`{field_name}` must be a positive number of seconds.") from exc

    if parsed <= 0:
        raise ValueError(f"`{field_name}` must be a positive number of seconds.")
    return parsed
