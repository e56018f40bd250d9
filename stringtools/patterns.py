"""
Pattern helpers shared by the trimmer, blank classifier and substitution engine.

Patterns may be given as strings or pre-compiled ``re.Pattern`` objects.
Compilation is always eager so a malformed pattern fails at call time
with InvalidPatternError instead of silently matching nothing.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern, Union

from stringtools.exceptions import InvalidPatternError


PatternLike = Union[str, Pattern]

# Python rendering of POSIX [[:cntrl:][:space:]]
DEFAULT_BLANK = r'[\x00-\x1f\x7f\s]'

# Identifier, optionally extended by punctuation-delimited word segments;
# the sigil and braces are not punctuation here so $a$b stays two references
DEFAULT_NAME_PATTERN = r'[^\W\d]\w*(?:[^\w\s${}]\w+)*'


def source(pattern: PatternLike) -> str:
    """Return the regex source text of a pattern-like value."""
    if isinstance(pattern, re.Pattern):
        return pattern.pattern
    return pattern


def flags_of(pattern: PatternLike) -> int:
    """Return the inline flags to carry over from a compiled pattern."""
    if isinstance(pattern, re.Pattern):
        # re.UNICODE is implied for str patterns
        return pattern.flags & ~re.UNICODE
    return 0


def is_empty(pattern: Optional[PatternLike]) -> bool:
    """True for an explicitly empty pattern, which disables matching."""
    return pattern is not None and source(pattern) == ''


def compile_pattern(pattern: PatternLike, role: Optional[str] = None, flags: int = 0) -> Pattern:
    """
    Compile a pattern eagerly.

    Args:
        pattern: Pattern text or compiled pattern
        role: What the pattern is used for, included in error messages
        flags: Extra ``re`` flags

    Returns:
        Compiled pattern

    Raises:
        InvalidPatternError: If the pattern does not compile
    """
    if isinstance(pattern, re.Pattern) and not flags:
        return pattern
    return _compile(source(pattern), flags | flags_of(pattern), role)


def anchored(pattern: PatternLike, at: str, role: Optional[str] = None) -> Pattern:
    """
    Compile ``pattern`` anchored at the start ('lead') or end ('rear') of a string.

    The pattern is wrapped in a non-capturing group so that alternations
    stay inside the anchor.
    """
    text = source(pattern)
    body = text
    if flags_of(pattern) & re.VERBOSE:
        # a trailing comment would swallow the closing paren
        body = text + '\n'
    if at == 'lead':
        wrapped = r'\A(?:' + body + ')'
    elif at == 'rear':
        wrapped = '(?:' + body + r')\Z'
    else:
        raise ValueError(f"Unknown anchor position: {at}")

    # Validate the bare pattern first so the error names what the caller wrote
    _compile(text, flags_of(pattern), role)
    return _compile(wrapped, flags_of(pattern), role)


@lru_cache(maxsize=256)
def _compile(text: str, flags: int, role: Optional[str]) -> Pattern:
    try:
        return re.compile(text, flags)
    except re.error as e:
        raise InvalidPatternError(text, str(e), role) from e
