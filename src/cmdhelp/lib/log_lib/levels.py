"""
THAC0 verbosity level constants.

The system compares raw integers; these names are for readability.
A message is shown when:

    message.level <= threshold

where threshold is the per-channel override or the global verbosity.

    ←── quieter ────────── default ────────── louder ──→
    -4    -3     -2       -1      0       1      2      3
    wall  errors warnings minimal default notice config debug
"""

# Louder (-v, -vv, -vvv)
DEBUG = 3          # Column widths, wrap decisions
CONFIG = 2         # Settings resolution, section inclusion
NOTICE = 1         # Extra context around results
DEFAULT = 0        # Normal output

# Quieter (-Q, -QQ, -QQQ, -QQQQ)
MINIMAL = -1
WARNING = -2
ERROR = -3
NOTHING = -4       # Hard wall — exit code only
