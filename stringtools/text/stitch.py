"""
Joining values with a thread that is suppressed around blank items.

    stitch('This', 'is', 'a', 'test', '\\n', 'of', 'it')  -> 'This is a test\\nof it'
    stitch(user, 'home dir is /home/', '', user)          -> 'bob home dir is /home/bob'
"""

from typing import Any, Optional

from stringtools.config import Settings, get_settings
from stringtools.text.blank import is_blank
from stringtools.text.stringify import stringify


def stitch(*items: Any, thread: Optional[str] = None, settings: Optional[Settings] = None) -> str:
    """
    Join ``items`` with ``thread`` (default: the configured thread).

    The thread is only placed between two adjacent non-blank items, so a
    blank item acts as a joint that glues its neighbours together.
    """
    settings = get_settings(settings)
    if thread is None:
        thread = settings.thread

    parts = []
    was_blank = True
    for item in items:
        text = stringify(item, settings)
        blank = is_blank(text, settings)
        if not (was_blank or blank):
            parts.append(thread)
        parts.append(text)
        was_blank = blank

    return ''.join(parts)


def stitcher(thread: Optional[str], *items: Any, settings: Optional[Settings] = None) -> str:
    """Stitch ``items`` with ``thread`` in place of the configured thread."""
    return stitch(*items, thread=thread, settings=settings)
