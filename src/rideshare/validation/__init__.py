"""Data validation module."""

from rideshare.validation.core import ValidationResult, ValidationRunner
from rideshare.validation.reporter import ConsoleReporter

__all__ = ["ConsoleReporter", "ValidationResult", "ValidationRunner"]
