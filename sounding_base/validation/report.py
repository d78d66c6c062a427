"""Validation results."""

from dataclasses import dataclass, field
from typing import List


class ValidationError(Exception):
    """Raised by :meth:`ValidationReport.raise_for_errors` for an invalid sounding."""

    def __init__(self, report: "ValidationReport"):
        super().__init__(f"Error validating sounding: {report}")
        self.report = report


@dataclass
class ValidationReport:
    """All rule violations found in a sounding.

    Attributes:
        errors: Violation messages, in the order they were found
    """
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Whether no violations were found."""
        return len(self.errors) == 0

    def push_error(self, message: str) -> None:
        """Record one violation."""
        self.errors.append(message)

    def raise_for_errors(self) -> None:
        """Raise ValidationError if any violation was found."""
        if not self.is_valid:
            raise ValidationError(self)

    def __bool__(self):
        return self.is_valid

    def __str__(self):
        if self.is_valid:
            return "no errors"
        return "; ".join(self.errors)
