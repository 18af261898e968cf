"""Code validators — deterministic rule engine and corrector for source snippets.

Usage:
    from app.validators import RuleEngine, Corrector, get_profile

    profile = get_profile("python")
    diagnostics = RuleEngine().run(code, profile)
    corrected = Corrector().apply(code, profile)
"""

from app.validators.corrector import Corrector
from app.validators.engine import RuleEngine
from app.validators.models import Diagnostic, Severity, ValidationResult
from app.validators.profiles import get_profile, list_profiles

__all__ = [
    "RuleEngine",
    "Corrector",
    "ValidationResult",
    "Diagnostic",
    "Severity",
    "get_profile",
    "list_profiles",
]
