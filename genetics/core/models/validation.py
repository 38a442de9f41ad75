"""Validation result types and errors."""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationIssue(BaseModel):
    """A single problem found in a catalog or its inputs."""

    severity: Severity
    category: str
    location: str
    message: str

    def __str__(self) -> str:
        return f"[{self.category}] {self.location}: {self.message}"


class ValidationResult(BaseModel):
    """Collected issues; the catalog is usable when no ERROR is present."""

    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def valid(self) -> bool:
        return not self.errors

    def add(
        self,
        severity: Severity,
        category: str,
        location: str,
        message: str,
    ) -> ValidationIssue:
        issue = ValidationIssue(
            severity=severity, category=category, location=location, message=message
        )
        self.issues.append(issue)
        return issue

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)


class GeneticsError(Exception):
    """Base class for errors raised by the genetics package."""


class CatalogValidationError(GeneticsError):
    """The trait catalog is missing mandatory categories.

    Raised before any character is processed.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        details = "; ".join(str(issue) for issue in result.errors)
        super().__init__(f"Catalog validation failed: {details}")


class ConfigError(GeneticsError):
    """Unknown configuration key or invalid value."""
