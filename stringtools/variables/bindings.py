"""
Binding sets for substitution.

A binding set can be supplied in several shapes; Bindings records which one
was given so the engine never has to guess from the payload alone.
"""

import logging
from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

TOPIC = '_'


class BindingKind(str, Enum):
    """Shape of the supplied bindings."""
    MAP = "map"
    PAIRS = "pairs"
    SINGLE = "single"
    EMPTY = "empty"


@dataclass(frozen=True)
class Bindings:
    """
    Variable bindings.

    Attributes:
        kind: Which shape the bindings were supplied in
        payload: A mapping (MAP), a flat name/value sequence (PAIRS),
            or a single value bound to '_' (SINGLE)
    """
    kind: BindingKind
    payload: Any = None

    @classmethod
    def mapping(cls, values: Mapping) -> 'Bindings':
        if not isinstance(values, Mapping):
            raise TypeError(f"Bindings.mapping() needs a mapping, got {type(values).__name__}")
        return cls(BindingKind.MAP, values)

    @classmethod
    def pairs(cls, values: Sequence) -> 'Bindings':
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise TypeError(f"Bindings.pairs() needs a sequence, got {type(values).__name__}")
        return cls(BindingKind.PAIRS, tuple(values))

    @classmethod
    def single(cls, value: Any) -> 'Bindings':
        return cls(BindingKind.SINGLE, value)

    @classmethod
    def empty(cls) -> 'Bindings':
        return cls(BindingKind.EMPTY)

    @classmethod
    def normalize(cls, rest: Tuple[Any, ...], topic: Optional[Any] = None) -> 'Bindings':
        """
        Build Bindings from the extra arguments of a subst() call.

        - no arguments: '_' bound to ``topic`` if it is given, else nothing
        - one mapping: its entries
        - one list/tuple: alternating names and values
        - one Bindings: used as is
        - one other value: bound to '_'
        - several arguments: alternating names and values
        """
        if not rest:
            if topic is None:
                return cls.empty()
            return cls.single(topic)

        if len(rest) == 1:
            only = rest[0]
            if isinstance(only, Bindings):
                return only
            if isinstance(only, Mapping):
                return cls.mapping(only)
            if isinstance(only, (list, tuple)):
                return cls.pairs(only)
            return cls.single(only)

        return cls.pairs(rest)

    def as_dict(self) -> Dict[Any, Any]:
        """Resolve to a name -> value dict. Later pairs win over earlier ones."""
        if self.kind == BindingKind.MAP:
            return dict(self.payload)
        if self.kind == BindingKind.SINGLE:
            return {TOPIC: self.payload}
        if self.kind == BindingKind.PAIRS:
            items = list(self.payload)
            if len(items) % 2:
                logger.warning(
                    f"Odd number of elements in bindings; '{items[-1]}' is bound to an empty value"
                )
                items.append(None)
            resolved = {}
            for name, value in zip(items[0::2], items[1::2]):
                if not isinstance(name, Hashable):
                    logger.debug(f"Skipping unhashable binding name: {name!r}")
                    continue
                resolved[name] = value
            return resolved
        return {}

