"""Readable messages for pydantic errors on drafts and glossary config.

Error locations are rendered the way the payload is written, so a bad
citation in a draft reads ``citations[0].lineRange.start`` and a bad
pattern setting reads ``pattern.max_phrase_words``.
"""

from pydantic import ValidationError as PydanticValidationError

# Draft text fields can be long; received values are cut to this length
MAX_INPUT_REPR = 60


def format_error_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path with list indices."""
    path = ""
    for item in loc:
        if isinstance(item, int):
            path += f"[{item}]"
        else:
            path += f".{item}" if path else str(item)
    return path or "unknown"


def _short_repr(value: object) -> str:
    text = repr(value)
    if len(text) > MAX_INPUT_REPR:
        return text[: MAX_INPUT_REPR - 3] + "..."
    return text


def flatten_pydantic_errors(exc: PydanticValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into one message per field.

    Value errors raised by our own validators (a broken character class, a
    capturing group in the English pattern) also show the rejected input.

    Args:
        exc: Pydantic ValidationError exception

    Returns:
        List of messages, each naming the field path

    Example:
        >>> from wikiglossary.models.draft import WikiDraft
        >>> try:
        ...     WikiDraft.model_validate({"sections": [{"summaryKo": 3}]})
        ... except PydanticValidationError as e:
        ...     flatten_pydantic_errors(e)
        ["Field 'sections[0].summaryKo': Input should be a valid string"]
    """
    errors: list[str] = []

    for error in exc.errors():
        field_path = format_error_location(tuple(error.get("loc", ())))
        msg = error.get("msg", "Unknown error")

        if error.get("type", "") == "value_error":
            formatted = (
                f"Field '{field_path}': {msg} "
                f"(received: {_short_repr(error.get('input'))})"
            )
        else:
            formatted = f"Field '{field_path}': {msg}"

        errors.append(formatted)

    return errors if errors else ["Validation failed with unknown error"]
