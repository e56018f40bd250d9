"""
Various tools for handling strings.

    from stringtools import define, is_blank, shrink, stitch, stitcher, subst, trim
"""

from .config import Settings, configure, get_settings, load_settings, reset_settings
from .exceptions import InvalidPatternError, SettingsValidationError, ValidationError
from .text import Ref, define, is_blank, shrink, stitch, stitcher, stringify, trim, trim_lines
from .variables import Bindings, BindingKind, VariableSubstitutor, subst, subst_vars

__version__ = '0.1.0'

__all__ = [
    'define',
    'stringify',
    'is_blank',
    'shrink',
    'stitch',
    'stitcher',
    'trim',
    'trim_lines',
    'subst',
    'subst_vars',
    'Ref',
    'Bindings',
    'BindingKind',
    'VariableSubstitutor',
    'Settings',
    'configure',
    'get_settings',
    'load_settings',
    'reset_settings',
    'InvalidPatternError',
    'SettingsValidationError',
    'ValidationError',
]
