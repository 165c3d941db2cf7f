"""Allow ``python -m cmdhelp``."""

import sys

from cmdhelp.cli import main

sys.exit(main())
