"""
Naming utilities for BlazeAuth.
"""

import re


_FIRST_CAP_RE = re.compile("(.)([A-Z][a-z]+)")
_ALL_CAP_RE = re.compile("([a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """
    Convert ``CamelCase`` or ``camelCase`` names to ``snake_case``.
    """
    step1 = _FIRST_CAP_RE.sub(r"\1_\2", name)
    snake = _ALL_CAP_RE.sub(r"\1_\2", step1).lower()
    return snake


def normalize_option_key(key: str) -> str:
    """
    Map ``identityProperty``, ``identity-property`` and ``IDENTITY_PROPERTY``
    onto ``identity_property``.
    """
    cleaned = key.strip().replace("-", "_")
    if cleaned.isupper():
        return cleaned.lower()
    return camel_to_snake(cleaned)
