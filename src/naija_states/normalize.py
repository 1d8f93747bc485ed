"""
String normalization used for every state name comparison.
"""

import re

FCT_NAME = "Federal Capital Territory"

# Closed list; anything else is compared as-is after normalization
FCT_ALIASES = frozenset(["fct", "f.c.t", "f c t", "abuja"])

# str.strip() leaves the byte order mark in place
_SURROUNDING_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def strip_blanks(value: str) -> str:
    """Remove surrounding whitespace, including U+FEFF."""
    return _SURROUNDING_BLANKS.sub("", value)


def normalize(value: str) -> str:
    """Lowercase and strip surrounding whitespace."""
    return strip_blanks(value.lower())


def resolve_alias(name: str) -> str:
    """
    Map the colloquial names of the Federal Capital Territory to its
    official name. Other input is returned unchanged, not normalized.
    """
    if normalize(name) in FCT_ALIASES:
        return FCT_NAME
    return name
