"""String primitives: stringification, blank detection, trimming and stitching."""

from .stringify import Ref, define, stringify
from .blank import is_blank
from .trim import shrink, trim, trim_lines
from .stitch import stitch, stitcher

__all__ = [
    'Ref', 'define', 'stringify', 'is_blank',
    'shrink', 'trim', 'trim_lines', 'stitch', 'stitcher',
]
