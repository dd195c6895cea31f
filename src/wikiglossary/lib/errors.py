"""Exceptions raised by wikiglossary.

Glossary building is total over well-shaped drafts: empty fields, missing
markup and junk candidates never raise. The errors here cover the remaining
cases: a draft payload with wrong field types, and configuration that cannot
be read or validated. The CLI catches WikiGlossaryError and reports it.
"""

from pydantic import ValidationError as PydanticValidationError

from wikiglossary.config.validator import flatten_pydantic_errors


class WikiGlossaryError(Exception):
    """Base exception for all wikiglossary errors."""

    pass


class ConfigError(WikiGlossaryError):
    """Exception raised for unusable glossary configuration.

    ``field`` names where the problem is: a config field path, an
    environment variable such as WIKIGLOSSARY_MAX_PHRASE_WORDS, or one of
    ``yaml_parse``, ``file_io`` and ``root`` for file-level problems.

    Attributes:
        field: The configuration field or source that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ValidationError(WikiGlossaryError):
    """Exception raised when a draft payload has the wrong shape.

    Only structurally malformed input ends up here, for example a
    ``sections`` value that is not a list or a ``summaryKo`` that is not a
    string.

    Attributes:
        field: The payload that failed validation (``draft``,
            ``accepted_output``)
        message: Description of the validation failure
        expected: Human description of the expected shape
        actual: Short description of what was received
    """

    def __init__(
        self,
        field: str,
        message: str,
        expected: str,
        actual: str,
    ) -> None:
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual
        full_message = (
            f"Validation error in '{field}': {message}\n"
            f"  Expected: {expected}\n"
            f"  Got: {actual}"
        )
        super().__init__(full_message)

    @classmethod
    def from_pydantic(
        cls, field: str, model_name: str, exc: PydanticValidationError
    ) -> "ValidationError":
        """Build an error listing every invalid path of a payload.

        Args:
            field: Name of the payload being validated
            model_name: Model the payload should have matched
            exc: The pydantic error raised by model validation

        Returns:
            ValidationError whose message joins the per-field messages
        """
        messages = flatten_pydantic_errors(exc)
        return cls(
            field=field,
            message="; ".join(messages),
            expected=f"{model_name}-shaped mapping",
            actual=f"{len(messages)} invalid field(s)",
        )


class FileNotFoundError(WikiGlossaryError):
    """Exception raised when a draft or configuration file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Hint for the user, e.g. how to fall back to defaults
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")
