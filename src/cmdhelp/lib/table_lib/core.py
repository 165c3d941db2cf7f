"""
Table layout engine.

Lays out a matrix of cells into left-aligned columns. Each column has its
own padding gap and wrap width; the whole block is indented. Cells may
span several lines and carry style escapes.

Usage::

    config = TableConfig(indent=4, padding=[2, 2], max_cell_width=[60, 80])
    print(layout([["-h, --help", "- Show this help."]], config))
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from cmdhelp.lib.log_lib import get_output

from .text import trim_trailing_spaces, visible_width, wrap_text


Cell = Optional[str]
Row = Sequence[Cell]
PerColumn = Union[int, Sequence[int], None]


@dataclass(frozen=True)
class TableConfig:
    """Layout settings for one table.

    Attributes:
        indent: Spaces before every rendered line (default 0).
        padding: Gap after each column except the last. A single int
            applies to every column; a sequence is per column (default 0).
        max_cell_width: Visible width at which cells wrap. A single int,
            a per-column sequence, or None for unlimited (default None).
            Zero or negative values also mean unlimited.
    """
    indent: int = 0
    padding: PerColumn = 0
    max_cell_width: PerColumn = None

    def resolve(self, columns: int) -> "ResolvedConfig":
        """Expand scalars into per-column lists and clamp bad values."""
        padding = [max(0, p or 0) for p in _expand(self.padding, columns, 0)]
        widths = [w if w is not None and w > 0 else None
                  for w in _expand(self.max_cell_width, columns, None)]
        return ResolvedConfig(indent=max(0, self.indent or 0),
                              padding=padding, max_cell_width=widths)


@dataclass(frozen=True)
class ResolvedConfig:
    """TableConfig after per-column expansion. Only layout() builds these."""
    indent: int
    padding: List[int]
    max_cell_width: List[Optional[int]]


def _expand(value, columns: int, default) -> list:
    """Turn a scalar-or-sequence setting into exactly ``columns`` values.

    Short sequences repeat their last value; long ones are truncated.
    """
    if value is None or isinstance(value, int):
        fill = default if value is None else value
        return [fill] * columns
    values = list(value)
    if not values:
        return [default] * columns
    if len(values) < columns:
        values.extend([values[-1]] * (columns - len(values)))
    return values[:columns]


def _normalize_rows(rows: Sequence[Row]) -> List[List[str]]:
    """Coerce cells to strings and pad short rows with empty cells."""
    columns = max((len(row) for row in rows), default=0)
    normalized = []
    for row in rows:
        cells = ["" if cell is None else str(cell) for cell in row]
        cells.extend([""] * (columns - len(cells)))
        normalized.append(cells)
    return normalized


def layout(rows: Sequence[Row], config: Optional[TableConfig] = None) -> str:
    """Render rows as an aligned, indented text block.

    Lines are joined with ``\\n`` without a trailing newline; trailing
    padding after the last visible content of a line is trimmed.
    Zero rows, or rows without cells, produce an empty string.
    """
    if not rows:
        return ""
    config = config or TableConfig()
    matrix = _normalize_rows(rows)
    columns = len(matrix[0])
    if columns == 0:
        return ""
    resolved = config.resolve(columns)

    wrapped = [
        [wrap_text(cell, resolved.max_cell_width[col])
         for col, cell in enumerate(row)]
        for row in matrix
    ]

    widths = [0] * columns
    for row in wrapped:
        for col, lines in enumerate(row):
            widths[col] = max([widths[col]] + [visible_width(l) for l in lines])

    get_output().emit(3, "[layout] {rows} rows, column widths {widths}",
                      channel='layout', rows=len(matrix), widths=widths)

    indent = " " * resolved.indent
    out = []
    for row in wrapped:
        height = max(len(lines) for lines in row)
        for index in range(height):
            parts = []
            for col, lines in enumerate(row):
                text = lines[index] if index < len(lines) else ""
                parts.append(text + " " * (widths[col] - visible_width(text)))
                if col < columns - 1:
                    parts.append(" " * resolved.padding[col])
            out.append(indent + trim_trailing_spaces("".join(parts)))
    return "\n".join(out)
