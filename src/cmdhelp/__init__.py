"""cmdhelp — help text renderer for command-line programs.

Turns a command description (options, sub-commands, environment
variables, examples) into aligned, styled help text.
"""

from cmdhelp._version import __version__, __app_name__
from cmdhelp.command import UNSET, Command, EnvVar, Example, Option
from cmdhelp.help import HelpGenerator, generate
from cmdhelp.lib.table_lib import TableConfig, layout, visible_width

__all__ = [
    "__version__", "__app_name__",
    "Command", "Option", "EnvVar", "Example", "UNSET",
    "HelpGenerator", "generate",
    "TableConfig", "layout", "visible_width",
]
