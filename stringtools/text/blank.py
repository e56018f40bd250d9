"""Blank detection."""

from typing import Any, Optional

from stringtools.config import Settings, get_settings
from stringtools.text.stringify import stringify


def is_blank(value: Any = None, settings: Optional[Settings] = None) -> bool:
    """
    Return True if ``value`` is blank.

    A value is blank when it stringifies to the empty string or to a string
    made up entirely of blank-class characters. ``"0"`` is not blank.
    """
    settings = get_settings(settings)
    text = stringify(value, settings)
    if not text:
        return True
    return settings.compiled().all_blank.match(text) is not None
