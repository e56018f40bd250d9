"""CLI command handlers."""

from .render import run_subst, run_vars
from .text import run_shrink, run_stitch, run_trim

__all__ = ['run_subst', 'run_vars', 'run_shrink', 'run_stitch', 'run_trim']
