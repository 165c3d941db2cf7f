"""
table_lib — style-aware text table layout.

Public API:
    layout          — render a matrix of cells as an aligned text block
    TableConfig     — indent / padding / max cell width settings
    visible_width   — width of a string ignoring style escapes
    strip_styles    — remove style escapes
    wrap_text       — split and wrap one cell into sealed physical lines
    trim_trailing_spaces — drop trailing spaces, keeping trailing escapes
"""

from .core import TableConfig, layout
from .text import (
    seal_lines, split_styled, strip_styles, trim_trailing_spaces, visible_width,
    wrap_text,
)

__all__ = [
    'TableConfig', 'layout',
    'visible_width', 'strip_styles', 'split_styled', 'wrap_text', 'seal_lines',
    'trim_trailing_spaces',
]
