"""Validation findings: issues are reported as values, not raised."""

from dataclasses import dataclass
from enum import Enum


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Finding:
    severity: Severity
    file: str
    message: str

    @classmethod
    def error(cls, file: str, message: str) -> "Finding":
        return cls(Severity.ERROR, file, message)

    @classmethod
    def warning(cls, file: str, message: str) -> "Finding":
        return cls(Severity.WARNING, file, message)
