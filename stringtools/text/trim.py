"""
Trimming of leading and trailing patterns.

``lead`` and ``rear`` follow these rules:
- None means "use the default": lead defaults to one-or-more blank-class
  characters, rear defaults to whatever lead resolved to.
- An empty pattern disables trimming on that side.
- Only what the pattern itself matches is removed, once per side.
"""

import re
from typing import Any, Optional, Pattern, Tuple

from stringtools.config import Settings, get_settings
from stringtools.patterns import PatternLike, anchored, is_empty
from stringtools.text.stringify import stringify


_LINE_BREAK = re.compile(r'(\r\n|\n|\r)')


def trim(
    value: Any = None,
    lead: Optional[PatternLike] = None,
    rear: Optional[PatternLike] = None,
    settings: Optional[Settings] = None
) -> str:
    """
    Remove one match of ``lead`` from the start and of ``rear`` from the end.

    Examples:
        trim('  This is a test  ')               -> 'This is a test'
        trim('--This is a test==', '-', '=')     -> '-This is a test='
        trim('  Hi!!', rear=r'[.?!]+')           -> 'Hi'

    Raises:
        InvalidPatternError: If ``lead`` or ``rear`` does not compile
    """
    text = stringify(value, settings)
    lead_re, rear_re = _resolve_patterns(lead, rear, settings)
    return _trim_text(text, lead_re, rear_re)


def trim_lines(
    value: Any = None,
    lead: Optional[PatternLike] = None,
    rear: Optional[PatternLike] = None,
    settings: Optional[Settings] = None
) -> str:
    """
    Like trim, but applied to every line independently.

    Line breaks are preserved and matches never extend across them.

    Raises:
        InvalidPatternError: If ``lead`` or ``rear`` does not compile
    """
    text = stringify(value, settings)
    lead_re, rear_re = _resolve_patterns(lead, rear, settings)

    pieces = _LINE_BREAK.split(text)
    # Even indexes hold line contents, odd indexes the breaks between them
    for i in range(0, len(pieces), 2):
        pieces[i] = _trim_text(pieces[i], lead_re, rear_re)
    return ''.join(pieces)


def shrink(value: Any = None, settings: Optional[Settings] = None) -> str:
    """
    Trim blank characters from both ends, then collapse each inner run of
    blank characters into a single thread.

        shrink('  This is  a    test\\n')  -> 'This is a test'
    """
    settings = get_settings(settings)
    text = trim(value, settings=settings)
    thread = settings.thread
    return settings.compiled().blank_run.sub(lambda m: thread, text)


def _resolve_patterns(
    lead: Optional[PatternLike],
    rear: Optional[PatternLike],
    settings: Optional[Settings]
) -> Tuple[Optional[Pattern], Optional[Pattern]]:
    """Apply the defaulting rules and compile both anchored patterns."""
    if lead is None:
        lead = '(?:' + get_settings(settings).blank + ')+'
    if rear is None:
        rear = lead

    lead_re = None if is_empty(lead) else anchored(lead, 'lead', role='lead')
    rear_re = None if is_empty(rear) else anchored(rear, 'rear', role='rear')
    return lead_re, rear_re


def _trim_text(text: str, lead_re: Optional[Pattern], rear_re: Optional[Pattern]) -> str:
    if lead_re is not None:
        text = lead_re.sub('', text, count=1)
    if rear_re is not None:
        text = rear_re.sub('', text, count=1)
    return text

