"""
Style-aware text measurement and wrapping.

Terminal style escapes (CSI sequences such as ``ESC[31m`` and OSC
hyperlinks) occupy bytes but no columns. Everything in table_lib measures
through visible_width() so escapes never count toward layout widths.

Only SGR escapes (``ESC[...m``) carry open/close state. seal_lines()
tracks that state across the physical lines of one cell so a style never
bleeds past a line boundary.
"""

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple


# CSI: ESC [ params intermediates final
# OSC: ESC ] ... terminated by BEL or ESC \
ESCAPE_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
)
SGR_RE = re.compile(r"\x1b\[([0-9;]*)m")
# run of spaces and escapes reaching the end of the line
_TRAILING_SPACE_RE = re.compile(r"(?: |" + ESCAPE_RE.pattern + r")+\Z")

RESET = "\x1b[0m"

# SGR close code -> predicate over the first parameter of an open code
_SGR_CLOSERS = {
    22: lambda code: code in (1, 2),
    23: lambda code: code == 3,
    24: lambda code: code == 4,
    25: lambda code: code in (5, 6),
    27: lambda code: code == 7,
    28: lambda code: code == 8,
    29: lambda code: code == 9,
    39: lambda code: 30 <= code <= 38 or 90 <= code <= 97,
    49: lambda code: 40 <= code <= 48 or 100 <= code <= 107,
    55: lambda code: code == 53,
}


def split_styled(text: str) -> Iterator[Tuple[str, bool]]:
    """Split text into ``(segment, is_escape)`` pairs, in order.

    Escape segments are whole sequences; text segments are the runs
    between them. Empty runs are not yielded.
    """
    pos = 0
    for match in ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield text[pos:match.start()], False
        yield match.group(0), True
        pos = match.end()
    if pos < len(text):
        yield text[pos:], False


def strip_styles(text: str) -> str:
    """Remove every style escape, keeping the visible characters."""
    return ESCAPE_RE.sub("", text)


def trim_trailing_spaces(line: str) -> str:
    """Drop trailing spaces, also those mixed with trailing escapes.

    The escapes themselves are kept, in order.
    """
    return _TRAILING_SPACE_RE.sub(
        lambda m: "".join(ESCAPE_RE.findall(m.group(0))), line)


def char_width(char: str) -> int:
    """Display units taken by a single character."""
    if unicodedata.combining(char):
        return 0
    if unicodedata.east_asian_width(char) in ("W", "F"):
        return 2
    return 1


def visible_width(text: str) -> int:
    """Width of the widest line of text, ignoring style escapes.

    This is the one measurement primitive every layout step uses.
    """
    if not text:
        return 0
    return max(
        sum(char_width(c) for c in strip_styles(line))
        for line in text.split("\n")
    )


# ---------------------------------------------------------------------------
# SGR state
# ---------------------------------------------------------------------------
def _first_param(params: str) -> int:
    head = params.split(";", 1)[0]
    return int(head) if head else 0


def update_styles(active: List[str], escape: str) -> List[str]:
    """Return the open SGR sequences after applying one escape.

    Non-SGR escapes leave the state alone. A reset clears it; a close
    code drops the opens it closes; anything else is an open.
    """
    match = SGR_RE.fullmatch(escape)
    if not match:
        return active
    code = _first_param(match.group(1))
    if code == 0:
        return []
    closes = _SGR_CLOSERS.get(code)
    if closes is not None:
        return [seq for seq in active
                if not closes(_first_param(SGR_RE.fullmatch(seq).group(1)))]
    return active + [escape]


def seal_lines(lines: List[str]) -> List[str]:
    """Close styles left open at each line end and reopen them on the next.

    Lines whose styles are balanced come back unchanged.
    """
    active: List[str] = []
    sealed = []
    for line in lines:
        prefix = "".join(active)
        for match in ESCAPE_RE.finditer(line):
            active = update_styles(active, match.group(0))
        sealed.append(prefix + line + (RESET if active else ""))
    return sealed


# ---------------------------------------------------------------------------
# Wrapping
# ---------------------------------------------------------------------------
@dataclass
class _Run:
    """A run of pieces that is all whitespace or all non-whitespace."""
    space: bool
    pieces: List[str]
    width: int = 0

    def escapes(self) -> List[str]:
        return [p for p in self.pieces if p.startswith("\x1b")]


def _runs(line: str) -> List[_Run]:
    """Group a line into alternating word and whitespace runs.

    Escapes are zero-width pieces that join whichever run is current
    (or the next one, at the very start of the line).
    """
    runs: List[_Run] = []
    leading: List[str] = []
    for segment, is_escape in split_styled(line):
        if is_escape:
            if runs:
                runs[-1].pieces.append(segment)
            else:
                leading.append(segment)
            continue
        for char in segment:
            space = char.isspace()
            if not runs or runs[-1].space != space:
                runs.append(_Run(space=space, pieces=leading))
                leading = []
            runs[-1].pieces.append(char)
            runs[-1].width += char_width(char)
    if leading:
        runs.append(_Run(space=False, pieces=leading))
    return runs


def _wrap_line(line: str, width: int) -> List[str]:
    """Greedy word wrap of one line (no newlines) at a visible width.

    Leading indentation is kept only when it fits on the first line
    together with the first word; otherwise only its escapes survive.
    """
    lines: List[List[str]] = [[]]
    current = 0
    pending: Optional[_Run] = None
    lead: Optional[_Run] = None
    started = False

    for run in _runs(line):
        if run.space:
            if not started:
                lead = run
                started = True
            else:
                pending = run
            continue

        started = True
        if lead is not None:
            if lead.width + run.width <= width:
                lines[-1].extend(lead.pieces)
                current += lead.width
            else:
                lines[-1].extend(lead.escapes())
            lead = None

        gap = pending.width if pending else 0
        if current > 0 and current + gap + run.width > width:
            lines.append(pending.escapes() if pending else [])
            current = 0
        elif pending:
            lines[-1].extend(pending.pieces)
            current += gap
        pending = None

        for piece in run.pieces:
            if piece.startswith("\x1b"):
                lines[-1].append(piece)
                continue
            piece_width = char_width(piece)
            if current > 0 and current + piece_width > width:
                lines.append([])
                current = 0
            lines[-1].append(piece)
            current += piece_width

    # whitespace-only line, or whitespace after the last word
    for tail in (lead, pending):
        if tail is not None:
            lines[-1].extend(tail.escapes())
    return ["".join(pieces) for pieces in lines]


def wrap_text(text: str, width: Optional[int] = None) -> List[str]:
    """Split a cell into physical lines, wrapping at ``width`` columns.

    Explicit newlines always break. A line wider than ``width`` is
    word-wrapped; words longer than ``width`` are hard-broken at exactly
    ``width``. ``None`` or a non-positive width means no wrapping. The
    returned lines are sealed (see seal_lines).
    """
    if width is not None and width <= 0:
        width = None
    lines: List[str] = []
    for line in text.split("\n"):
        if width is None or visible_width(line) <= width:
            lines.append(line)
        else:
            lines.extend(_wrap_line(line, width))
    return seal_lines(lines)
