"""
Variable substitution implementation.
Handles $name and ${ name } references against a binding set.
"""

import logging
import re
from typing import Any, Dict, Iterable, List, Optional, Pattern, Union

from stringtools.config import Settings, get_settings
from stringtools.patterns import compile_pattern
from stringtools.text.stringify import stringify
from stringtools.text.trim import trim
from stringtools.variables.bindings import Bindings


logger = logging.getLogger(__name__)

# Wrapper around a reference as written in a template: '$' or '${ ' ... ' }'
REF_LEAD = r'\$\{?\s*'
REF_REAR = r'\s*\}'


def order_names(names: Iterable[str]) -> List[str]:
    """Sort names longest first, then lexicographically."""
    return sorted(set(names), key=lambda name: (-len(name), name))


def build_pattern(names: Iterable[str]) -> Optional[Pattern]:
    """
    Build the match pattern for the given variable names.

    Names are tried longest first so that a bound name never matches as a
    prefix of a longer bound name. The brace form captures into group 1,
    the bare form into group 2.

    Returns:
        Compiled pattern, or None if there are no names
    """
    ordered = order_names(names)
    if not ordered:
        return None
    alternation = '|'.join(re.escape(name) for name in ordered)
    return compile_pattern(
        rf'\$(?:\{{\s*({alternation})\s*\}}|({alternation})\b)', role='substitution'
    )


class VariableSubstitutor:
    """
    Handles variable substitution in strings and data structures.

    Two reference forms are recognised:
    - brace: ${name} or ${ name }
    - bare: $name, which must not be followed by another word character

    Names not present in the binding set are left untouched.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the substitutor with optional settings (defaults are read per call)."""
        self._settings = settings
        self.replacements = 0

    @property
    def settings(self) -> Settings:
        return get_settings(self._settings)

    def substitute(
        self,
        value: Union[str, List, Dict, Any],
        bindings: Bindings
    ) -> Union[str, List, Dict, Any]:
        """
        Substitute variables in a value (string, list, or dict).

        Args:
            value: The value to substitute variables in
            bindings: Variable bindings

        Returns:
            Value with variables substituted; dict keys and non-string
            leaves are returned unchanged
        """
        self.replacements = 0
        variables = self.filter_bindings(bindings.as_dict())
        pattern = build_pattern(variables)
        if pattern is None:
            return value
        result = self._substitute_value(value, variables, pattern)
        logger.debug(f"Made {self.replacements} substitution(s)")
        return result

    def substitute_string(self, text: Any, bindings: Bindings) -> str:
        """Substitute variables in a single template, stringifying it first."""
        return self.substitute(stringify(text, self.settings), bindings)

    def variables(self, text: Any) -> List[str]:
        """
        List the distinct variable names referenced in ``text``.

        Returns:
            Names in order of first appearance
        """
        name = '(?:' + self.settings.name_pattern + ')'
        pattern = compile_pattern(rf'\$(?:\{{\s*{name}\s*\}}|{name})', role='name_pattern')

        seen = []
        for match in pattern.finditer(stringify(text, self.settings)):
            var = trim(match.group(0), REF_LEAD, REF_REAR)
            if var not in seen:
                seen.append(var)
        return seen

    def filter_bindings(self, variables: Dict[Any, Any]) -> Dict[str, Any]:
        """Keep only non-empty string names that fit the variable-name grammar."""
        grammar = self.settings.compiled().name
        kept = {}
        ignored = []
        for name, value in variables.items():
            if isinstance(name, str) and name and grammar.fullmatch(name):
                kept[name] = value
            else:
                ignored.append(name)
        if ignored:
            logger.debug(f"Ignoring binding names outside the variable grammar: {ignored!r}")
        return kept

    def _substitute_value(self, value: Any, variables: Dict[str, Any], pattern: Pattern) -> Any:
        if isinstance(value, str):
            return self._substitute_string(value, variables, pattern)
        elif isinstance(value, list):
            return [self._substitute_value(item, variables, pattern) for item in value]
        elif isinstance(value, dict):
            return {k: self._substitute_value(v, variables, pattern) for k, v in value.items()}
        else:
            # Non-string/list/dict values pass through unchanged
            return value

    def _substitute_string(self, text: str, variables: Dict[str, Any], pattern: Pattern) -> str:
        settings = self.settings

        def replace_var(match):
            self.replacements += 1
            name = match.group(1) or match.group(2)
            return stringify(variables[name], settings)

        return pattern.sub(replace_var, text)


def subst(template: Any, *rest: Any, topic: Optional[Any] = None,
          settings: Optional[Settings] = None) -> str:
    """
    Replace the variables named in the bindings with their values.

    The bindings may be given as a mapping, a Bindings instance, a list or
    tuple of alternating names and values, the names and values themselves
    as positional arguments, or a single value (bound to ``_``). With no
    bindings, ``_`` is bound to ``topic`` if it is given.

        subst('Today is ${ day } of $month', {'day': '15th', 'month': 'August'})
        subst('Today is ${ day } of $month', 'day', '15th', 'month', 'August')
        subst('You want $_.', 'this')

    Pass an empty dict or list to substitute nothing even when ``topic`` is set.
    """
    bindings = Bindings.normalize(rest, topic=topic)
    return VariableSubstitutor(settings).substitute_string(template, bindings)


def subst_vars(template: Any = None, settings: Optional[Settings] = None) -> List[str]:
    """Return the distinct variable names referenced in ``template``, in order."""
    return VariableSubstitutor(settings).variables(template)
