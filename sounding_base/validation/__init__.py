"""
Sounding validation.

Classes
-------
ValidationReport
    Accumulated rule violations for one sounding
ValidationError
    Exception carrying a failed ValidationReport
"""

from sounding_base.validation.report import ValidationReport, ValidationError
from sounding_base.validation.checks import run_checks

__all__ = [
    "ValidationReport",
    "ValidationError",
    "run_checks",
]
