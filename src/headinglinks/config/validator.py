"""Validation helpers for headinglinks configuration."""

from pydantic import ValidationError as PydanticValidationError


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per field.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of human-readable error messages

    Example:
        >>> from headinglinks.models.config import LinkListConfig
        >>> try:
        ...     LinkListConfig(heading_levels=[7])
        ... except PydanticValidationError as e:
        ...     flatten_pydantic_errors(e)[0].startswith("Field 'heading_levels'")
        True
    """
    errors: list[str] = []

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(item) for item in loc) if loc else "unknown"
        msg = error.get("msg", "Unknown error")

        if error.get("type") in ("value_error", "extra_forbidden"):
            formatted = f"Field '{field_path}': {msg} (received: {error.get('input')!r})"
        else:
            formatted = f"Field '{field_path}': {msg}"
        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]
