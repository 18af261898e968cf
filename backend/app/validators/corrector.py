"""Corrector — blind textual rewrites of well-known typos.

The corrector does not look at diagnostics. It fixes what it recognizes and
leaves structural problems (unbalanced braces, missing colons) in place, so the
corrected code may still fail validation.
"""

from app.validators.base import LanguageProfile


class Corrector:
    """Applies a profile's rewrite rules in order, each on the previous output."""

    def apply(self, source: str, profile: LanguageProfile) -> str:
        corrected = source
        for rule in profile.corrector_rules:
            corrected = rule.apply(corrected)
        return corrected
