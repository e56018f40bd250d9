"""stringtools exceptions."""

from typing import List, Optional
from dataclasses import dataclass


@dataclass
class ValidationError:
    """Single validation error."""
    message: str
    path: str = ""
    exit_code: int = 2


class SettingsValidationError(Exception):
    """Raised when a settings file fails validation.

    The loader collects every problem before raising, so the CLI can report
    them all at once and map to the validation exit code.
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = errors
        self.exit_code = 2

        messages = []
        for error in errors:
            messages.append(f"Validation error: {error.message}")

        super().__init__("\n".join(messages))


class InvalidPatternError(ValueError):
    """Raised when a pattern argument does not compile as a regular expression."""

    def __init__(self, pattern: str, reason: str, role: Optional[str] = None):
        self.pattern = pattern
        self.reason = reason
        self.role = role
        where = f" for {role}" if role else ""
        super().__init__(f"Invalid pattern{where} {pattern!r}: {reason}")
