"""Placeholder substitution and environment overlays.

Tokens have the form ``{{key}}``. Substitution is one regex pass: each whole
token is matched atomically and looked up in the value map, so a key that is a
prefix of another key cannot clobber it, and inserted values are never scanned
again. Tokens with no value in the map are left untouched for a later pass.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

from .models import EnvironmentOverride

TOKEN_PATTERN = re.compile(r"\{\{([^{}]*)\}\}")


def substitute(content: str, values: Optional[Mapping[str, str]]) -> str:
    """Replace every ``{{key}}`` token in *content* whose key is in *values*.

    Keys are matched literally: ``{{ name }}`` only matches the key
    ``" name "`` and ``{{}}`` is the empty key ``""``.
    """
    if not values:
        return content

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in values:
            return str(values[key])
        return match.group(0)

    return TOKEN_PATTERN.sub(_replace, content)


def find_placeholders(content: str) -> list[str]:
    """Return the distinct token keys in *content*, in order of first appearance."""
    seen: dict[str, None] = {}
    for match in TOKEN_PATTERN.finditer(content):
        seen.setdefault(match.group(1), None)
    return list(seen)


def apply_environment_override(
    content: str,
    override: Optional[EnvironmentOverride],
    placeholders: Optional[Mapping[str, str]] = None,
) -> str:
    """Overlay an environment override onto sampled *content*.

    A non-empty ``override.content`` replaces the text outright. ``merge``
    values are then substituted into whichever text is active, and
    *placeholders* are substituted into that result. A ``merge`` key that
    also appears in *placeholders* is skipped so the placeholder wins.
    """
    placeholders = placeholders or {}
    if override is not None:
        if override.content:
            content = override.content
        if override.merge:
            merge = {k: v for k, v in override.merge.items() if k not in placeholders}
            content = substitute(content, merge)
    return substitute(content, placeholders)
