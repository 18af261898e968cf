"""Rule primitives — line rules, whole-source rules, and rewrite rules.

Each rule is a standalone, independently testable unit.
Language profiles are assembled from these without touching the engine.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
import re
from typing import Optional, Union

from app.validators.models import Diagnostic, Severity


@dataclass(frozen=True)
class SourceLine:
    """One line of the source under review."""

    number: int  # 1-based
    raw: str
    text: str    # trimmed


class LineRule(ABC):
    """Abstract base for rules evaluated once per source line.

    Contract:
        - check() is deterministic: same input → same output
        - check() returns at most one Diagnostic
        - No mutation of the source or the profile
    """

    def __init__(self, name: str, message: str, severity: Severity = Severity.ERROR):
        self.name = name
        self.message = message
        self.severity = severity

    @abstractmethod
    def check(self, line: SourceLine, source: str) -> Optional[Diagnostic]:
        """Evaluate the rule against a single line.

        Args:
            line: The line under inspection (number, raw and trimmed text)
            source: The full source, for rules that need context

        Returns:
            A Diagnostic anchored at the line, or None
        """
        ...

    def _emit(self, line: SourceLine) -> Diagnostic:
        return Diagnostic(line=line.number, message=self.message, severity=self.severity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class SourceRule(ABC):
    """Abstract base for rules evaluated once against the whole source."""

    def __init__(self, name: str, severity: Severity = Severity.ERROR):
        self.name = name
        self.severity = severity

    @abstractmethod
    def check(self, source: str) -> Optional[Diagnostic]:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


Rule = Union[LineRule, SourceRule]


def word_pattern(text: str) -> str:
    """Regex matching ``text`` literally, bounded wherever it starts or ends with a word character."""
    pattern = re.escape(text)
    if re.match(r"\w", text[0]):
        pattern = r"\b" + pattern
    if re.match(r"\w", text[-1]):
        pattern = pattern + r"\b"
    return pattern


class PatternRule(LineRule):
    """Fires when the trimmed line matches ``pattern`` and none of the exclusions hold.

    Args:
        pattern: Regex that must match the trimmed line
        unless: Regex that suppresses the rule when it matches the trimmed line
        unless_in_source: Regex that suppresses the rule when it matches the full source
    """

    def __init__(
        self,
        name: str,
        pattern: str,
        message: str,
        severity: Severity = Severity.ERROR,
        unless: Optional[str] = None,
        unless_in_source: Optional[str] = None,
    ):
        super().__init__(name, message, severity)
        self.pattern = re.compile(pattern)
        self.unless = re.compile(unless) if unless else None
        self.unless_in_source = re.compile(unless_in_source) if unless_in_source else None

    def check(self, line: SourceLine, source: str) -> Optional[Diagnostic]:
        if not self.pattern.search(line.text):
            return None
        if self.unless and self.unless.search(line.text):
            return None
        if self.unless_in_source and self.unless_in_source.search(source):
            return None
        return self._emit(line)


class TypoRule(PatternRule):
    """Flags a known misspelling of a keyword or identifier."""

    def __init__(self, typo: str, correct: str, severity: Severity = Severity.ERROR):
        super().__init__(
            name=f"typo_{typo}",
            pattern=word_pattern(typo),
            message=f"Typo: '{typo}' should be '{correct}'",
            severity=severity,
        )


class BalanceRule(SourceRule):
    """Compares counts of an opening and a closing delimiter across the whole source."""

    def __init__(self, name: str, opening: str, closing: str, label: str):
        super().__init__(name, Severity.ERROR)
        self.opening = opening
        self.closing = closing
        self.label = label

    def check(self, source: str) -> Optional[Diagnostic]:
        opened = source.count(self.opening)
        closed = source.count(self.closing)
        if opened == closed:
            return None
        return Diagnostic(
            line=1,
            message=f"Unmatched {self.label}: {opened} opening, {closed} closing",
            severity=self.severity,
        )


@dataclass(frozen=True)
class RewriteRule:
    """Blind textual substitution applied to the whole source."""

    pattern: re.Pattern
    replacement: str

    @classmethod
    def literal(cls, typo: str, correct: str) -> "RewriteRule":
        """Rewrite a whole-word misspelling."""
        return cls(re.compile(word_pattern(typo)), correct)

    @classmethod
    def regex(cls, pattern: str, replacement: str) -> "RewriteRule":
        return cls(re.compile(pattern), replacement)

    def apply(self, text: str) -> str:
        # Replacement is literal, never a template
        return self.pattern.sub(lambda _: self.replacement, text)


@dataclass(frozen=True)
class LanguageProfile:
    """Closed, language-specific bundle of diagnostic rules and rewrite rules."""

    id: str
    display_name: str
    file_extension: str
    rules: tuple[Rule, ...] = ()
    corrector_rules: tuple[RewriteRule, ...] = ()

    @property
    def line_rules(self) -> tuple[LineRule, ...]:
        return tuple(r for r in self.rules if isinstance(r, LineRule))

    @property
    def source_rules(self) -> tuple[SourceRule, ...]:
        return tuple(r for r in self.rules if isinstance(r, SourceRule))
