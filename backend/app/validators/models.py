"""Validation models — severity levels, diagnostics, and the result contract.

The heuristic path is deterministic: same input → same output, no randomness, no LLM calls.
Enriched results from the LLM backend must satisfy the same model to be accepted.
"""

from enum import Enum

from pydantic import BaseModel, Field, PrivateAttr, model_validator
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Diagnostic severity levels."""

    ERROR = "error"      # Blocks a successful run
    WARNING = "warning"  # Informational


class Diagnostic(BaseModel):
    """A single finding anchored to a source line."""

    line: int = Field(ge=1)
    message: str
    severity: Severity

    model_config = {"frozen": True, "use_enum_values": True}


# Fixed diagnostic for processing failures
ANALYSIS_FAILED_MESSAGE = "Error analyzing code"


class ValidationResult(BaseModel):
    """Complete validation result — the output of the code review service.

    Serialized with camelCase keys (``hasErrors``, ``errorCount``, ...).
    Both camelCase and snake_case are accepted on input.
    """

    has_errors: bool
    error_count: int = Field(ge=0)
    warning_count: int = Field(ge=0)
    errors: list[Diagnostic]
    corrected_code: str
    explanation: str

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }

    _degraded: bool = PrivateAttr(default=False)

    @model_validator(mode="after")
    def check_counts(self) -> "ValidationResult":
        errors = sum(1 for d in self.errors if d.severity == Severity.ERROR)
        warnings = sum(1 for d in self.errors if d.severity == Severity.WARNING)
        if self.error_count != errors:
            raise ValueError(f"errorCount is {self.error_count} but errors lists {errors}")
        if self.warning_count != warnings:
            raise ValueError(f"warningCount is {self.warning_count} but errors lists {warnings}")
        if self.has_errors != (errors > 0):
            raise ValueError("hasErrors does not match errorCount")
        return self

    @property
    def degraded(self) -> bool:
        """True when this result stands in for a failed analysis."""
        return self._degraded

    @classmethod
    def build(cls, errors: list[Diagnostic], corrected_code: str) -> "ValidationResult":
        """Build a complete result from diagnostics and corrected source."""
        error_count = sum(1 for d in errors if d.severity == Severity.ERROR)
        warning_count = sum(1 for d in errors if d.severity == Severity.WARNING)
        has_errors = error_count > 0

        if has_errors:
            explanation = f"Found {error_count} error(s) and {warning_count} warning(s) in your code."
        elif warning_count > 0:
            explanation = f"No critical errors, but found {warning_count} warning(s)."
        else:
            explanation = "Your code looks good! No errors detected."

        return cls(
            has_errors=has_errors,
            error_count=error_count,
            warning_count=warning_count,
            errors=list(errors),
            corrected_code=corrected_code,
            explanation=explanation,
        )

    @classmethod
    def degraded_result(cls) -> "ValidationResult":
        """The fixed result returned when analysis itself fails."""
        result = cls(
            has_errors=True,
            error_count=1,
            warning_count=0,
            errors=[Diagnostic(line=1, message=ANALYSIS_FAILED_MESSAGE, severity=Severity.ERROR)],
            corrected_code="",
            explanation="Failed to analyze code.",
        )
        result._degraded = True
        return result
