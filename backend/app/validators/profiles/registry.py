"""Language profile registry — resolves a language identifier to its rule set.

Profiles are built once at import time and never mutated, so lookups are
safe to share across concurrent requests.
"""

from types import MappingProxyType
from typing import Optional

from app.validators.base import LanguageProfile
from app.validators.profiles.cpp import CPP
from app.validators.profiles.java import JAVA
from app.validators.profiles.javascript import JAVASCRIPT
from app.validators.profiles.python import PYTHON

DEFAULT_LANGUAGE = JAVASCRIPT.id

_PROFILES = MappingProxyType({
    profile.id: profile
    for profile in (JAVASCRIPT, PYTHON, JAVA, CPP)
})


def get_profile(language_id: Optional[str]) -> LanguageProfile:
    """Look up a profile by exact identifier.

    Unknown identifiers fall back to the JavaScript profile; this is not an error.
    """
    return _PROFILES.get(language_id, _PROFILES[DEFAULT_LANGUAGE])


def list_profiles() -> list[LanguageProfile]:
    """All registered profiles in registration order."""
    return list(_PROFILES.values())


def is_supported(language_id: Optional[str]) -> bool:
    return language_id in _PROFILES
