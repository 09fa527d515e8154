from flask import request
from wiki.domain.exceptions import ClientInputError


def required_field(name: str) -> str:
    value = request.form.get(name)
    if value is None:
        raise ClientInputError(f"missing form field '{name}'")
    return value


def required_int(name: str) -> int:
    """Read a form field that must parse as an integer."""
    value = required_field(name)
    try:
        return int(value)
    except ValueError:
        raise ClientInputError(f"form field '{name}' must be an integer, got {value!r}") from None
