"""
Stringification of arbitrary values.

Sequences and mappings are flattened one level only: their elements get
their plain scalar text, they are not stringified recursively.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from stringtools.config import Settings, get_settings


@dataclass(frozen=True)
class Ref:
    """Indirection to another value; stringifies as its target."""
    target: Any = None

    def resolve(self) -> Any:
        """Follow the chain of Refs to the first non-Ref value."""
        seen = set()
        current: Any = self
        while isinstance(current, Ref):
            if id(current) in seen:
                return None
            seen.add(id(current))
            current = current.target
        return current


def define(value: Any = None) -> Any:
    """Return ``value`` if it is not None, otherwise the empty string."""
    return '' if value is None else value


def stringify(value: Any = None, settings: Optional[Settings] = None) -> str:
    """
    Render any value as text.

    - None -> ''
    - str, numbers -> their text form
    - bools -> 'true' / 'false', as lowercase words rather than str(True)
    - list/tuple -> elements joined with the list separator
    - mapping -> keys and values, alternating, joined the same way
    - Ref -> the stringified target
    - anything else -> str(value)

    Never raises.
    """
    if isinstance(value, Ref):
        value = value.resolve()

    scalar = _scalar_text(value)
    if scalar is not None:
        return scalar

    separator = get_settings(settings).list_separator
    if isinstance(value, (list, tuple)):
        return separator.join(_element_text(item) for item in value)
    if isinstance(value, Mapping):
        flat = []
        for key, item in value.items():
            flat.append(key)
            flat.append(item)
        return separator.join(_element_text(item) for item in flat)

    return _default_text(value)


def _scalar_text(value: Any) -> Optional[str]:
    """Text of a scalar, or None if ``value`` is not a scalar."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _element_text(value: Any) -> str:
    scalar = _scalar_text(value)
    if scalar is not None:
        return scalar
    return _default_text(value)


def _default_text(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return object.__repr__(value)
