"""Language profiles — per-language diagnostic and rewrite rule tables."""

from app.validators.profiles.registry import DEFAULT_LANGUAGE, get_profile, is_supported, list_profiles

__all__ = ["DEFAULT_LANGUAGE", "get_profile", "is_supported", "list_profiles"]
