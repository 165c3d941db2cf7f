"""User-facing message helpers for cmdhelp commands.

Rendered help and tables go to stdout with plain print(). Status and
error messages go through here so they respect the THAC0 quiet axis.

Also re-exports the log_lib public API for convenience imports.
"""

import sys

from cmdhelp.lib.log_lib import (                     # noqa: F401
    OutputManager, init_output, get_output, trace,
)


def _should_print():
    """True unless verbosity is at -3 (errors only) or below."""
    return get_output().verbosity >= -2


def print_warn(msg):
    """Print a warning message to stderr."""
    if _should_print():
        print(f"  [WARN] {msg}", file=sys.stderr)


def print_error(msg):
    """Print an error message to stderr.

    Routes through OutputManager.error() which emits at level -3, so it
    shows at every verbosity except the hard wall (-QQQQ).
    """
    get_output().error(f"  ERROR: {msg}")
