"""Terminal output for skillpack commands."""

from .console import Console
from .stdout import ValidationReporter

__all__ = ["Console", "ValidationReporter"]
