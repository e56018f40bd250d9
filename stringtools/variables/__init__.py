"""
Variable substitution module.
Implements $name / ${ name } substitution against a binding set.
"""

from .bindings import Bindings, BindingKind
from .substitution import VariableSubstitutor, build_pattern, subst, subst_vars

__all__ = ['Bindings', 'BindingKind', 'VariableSubstitutor', 'build_pattern', 'subst', 'subst_vars']
