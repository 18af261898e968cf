import pytest
from pydantic import ValidationError

from app.validators.models import Diagnostic, Severity, ValidationResult


def error(line: int = 1) -> Diagnostic:
    return Diagnostic(line=line, message="broken", severity=Severity.ERROR)


def warning(line: int = 1) -> Diagnostic:
    return Diagnostic(line=line, message="suspicious", severity=Severity.WARNING)


def test_build_clean_result():
    result = ValidationResult.build([], "x = 1")

    assert result.has_errors is False
    assert result.error_count == 0
    assert result.warning_count == 0
    assert result.corrected_code == "x = 1"
    assert result.explanation == "Your code looks good! No errors detected."


def test_build_warnings_only():
    result = ValidationResult.build([warning(), warning(2)], "")

    assert result.has_errors is False
    assert result.warning_count == 2
    assert result.explanation == "No critical errors, but found 2 warning(s)."


def test_build_errors_and_warnings():
    result = ValidationResult.build([error(3), warning(1), error(2)], "")

    assert result.has_errors is True
    assert result.error_count == 2
    assert result.warning_count == 1
    assert result.explanation == "Found 2 error(s) and 1 warning(s) in your code."
    # Detection order is kept, not sorted by line
    assert [d.line for d in result.errors] == [3, 1, 2]


def test_serializes_with_camel_case_keys():
    payload = ValidationResult.build([error()], "fixed").model_dump(by_alias=True, mode="json")

    assert payload == {
        "hasErrors": True,
        "errorCount": 1,
        "warningCount": 0,
        "errors": [{"line": 1, "message": "broken", "severity": "error"}],
        "correctedCode": "fixed",
        "explanation": "Found 1 error(s) and 0 warning(s) in your code.",
    }


def test_accepts_camel_case_input():
    result = ValidationResult.model_validate({
        "hasErrors": False,
        "errorCount": 0,
        "warningCount": 1,
        "errors": [{"line": 2, "message": "hmm", "severity": "warning"}],
        "correctedCode": "",
        "explanation": "ok",
    })

    assert result.warning_count == 1
    assert result.errors[0].severity == Severity.WARNING


@pytest.mark.parametrize(
    "overrides",
    [
        {"errorCount": 2},
        {"warningCount": 1},
        {"hasErrors": False},
    ],
)
def test_rejects_inconsistent_counts(overrides):
    payload = {
        "hasErrors": True,
        "errorCount": 1,
        "warningCount": 0,
        "errors": [{"line": 1, "message": "broken", "severity": "error"}],
        "correctedCode": "",
        "explanation": "",
    }
    payload.update(overrides)

    with pytest.raises(ValidationError):
        ValidationResult.model_validate(payload)


def test_rejects_unknown_severity_and_bad_line():
    with pytest.raises(ValidationError):
        Diagnostic(line=1, message="x", severity="fatal")
    with pytest.raises(ValidationError):
        Diagnostic(line=0, message="x", severity="error")


def test_degraded_result():
    result = ValidationResult.degraded_result()

    assert result.degraded is True
    assert result.has_errors is True
    assert result.error_count == 1
    assert result.warning_count == 0
    assert result.corrected_code == ""
    assert [(d.line, d.message, d.severity) for d in result.errors] == [(1, "Error analyzing code", "error")]
    assert "degraded" not in result.model_dump(by_alias=True)


def test_built_result_is_not_degraded():
    assert ValidationResult.build([error()], "").degraded is False
