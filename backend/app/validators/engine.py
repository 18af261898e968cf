"""Rule Engine — evaluates a language profile's rules against source text.

Line rules run first, line by line, in profile order. Whole-source rules run
after the scan, so structural findings always trail local findings.

Usage:
    engine = RuleEngine()
    diagnostics = engine.run(code, get_profile("python"))
"""

import time

import structlog

from app.validators.base import LanguageProfile, SourceLine
from app.validators.models import Diagnostic

logger = structlog.get_logger()


def split_lines(source: str) -> list[SourceLine]:
    """Split source into numbered lines (1-based) with trimmed text."""
    return [
        SourceLine(number=index, raw=raw, text=raw.strip())
        for index, raw in enumerate(source.split("\n"), start=1)
    ]


class RuleEngine:
    """Runs a profile's rules and returns diagnostics in detection order.

    Design principles:
        - Deterministic: same input → same output
        - Pure: rules never mutate the source or the profile
        - Never re-sorts: order is line scan, then whole-source rules
    """

    def run(self, source: str, profile: LanguageProfile) -> list[Diagnostic]:
        """Evaluate every rule of the profile against the source.

        Args:
            source: Code under review
            profile: Language profile supplying the rules

        Returns:
            Ordered list of Diagnostic findings (empty if no issues)
        """
        start_time = time.perf_counter()
        diagnostics: list[Diagnostic] = []

        line_rules = profile.line_rules
        for line in split_lines(source):
            for rule in line_rules:
                diagnostic = rule.check(line, source)
                if diagnostic is not None:
                    diagnostics.append(diagnostic)

        for rule in profile.source_rules:
            diagnostic = rule.check(source)
            if diagnostic is not None:
                diagnostics.append(diagnostic)

        logger.debug(
            "rule_scan_complete",
            language=profile.id,
            findings=len(diagnostics),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return diagnostics
