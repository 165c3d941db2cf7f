"""Help text generation for a Command.

Builds one cell matrix per section, lays each out with table_lib and
joins the blocks. Sections without data are left out entirely:

    Usage / Version     always
    Description         description set
    Options             at least one visible option
    Commands            at least one visible sub-command
    Environment vars    at least one visible variable
    Examples            at least one example

Only the first line of an option or sub-command description is shown;
these tables are a summary, not the full text.
"""

import re
from typing import List, Optional

from cmdhelp.arguments import highlight_arguments
from cmdhelp.command import Command, Option
from cmdhelp.formatting import format_value
from cmdhelp.lib.log_lib import get_output, trace
from cmdhelp.lib.table_lib import TableConfig, layout
from cmdhelp.styles import bold, danger, dim, flag, heading, info, magenta, warning, yellow


DEFAULT_INDENT = 2
DEFAULT_VERSION = '0.0.0'

_FLAG_SPLIT_RE = re.compile(r",? +")


def capitalize(text: str) -> str:
    """Upper-case only the first character."""
    return text[:1].upper() + text[1:]


def first_line(text: Optional[str]) -> str:
    return (text or '').split('\n', 1)[0]


def _bullet(text: str) -> str:
    return danger(bold('-')) + ' ' + text


def generate_hints(option: Option) -> str:
    """Build the parenthesized hint list for an option, or ''.

    Order is fixed: required, default, depends, conflicts. A default is
    shown whenever one is defined, including 0, False and ''.
    """
    hints = []
    if option.required:
        hints.append(warning('required'))
    if option.has_default:
        hints.append(info(bold('Default: ')) + info(format_value(option.default)))
    if option.depends:
        hints.append(danger(bold('depends: '))
                     + ', '.join(danger(name) for name in option.depends))
    if option.conflicts:
        hints.append(danger(bold('conflicts: '))
                     + ', '.join(danger(name) for name in option.conflicts))
    if hints:
        return '(' + ', '.join(hints) + ')'
    return ''


class HelpGenerator:
    """Renders the help document of one command.

    Only the command itself and summary fields of its direct sub-commands
    are read; sub-commands are never rendered recursively.
    """

    def __init__(self, command: Command, indent: int = DEFAULT_INDENT):
        self.cmd = command
        self.indent = max(0, indent)

    def generate(self) -> str:
        sections = [
            ('header', self.generate_header()),
            ('description', self.generate_description()),
            ('options', self.generate_options()),
            ('commands', self.generate_commands()),
            ('environment', self.generate_environment_variables()),
            ('examples', self.generate_examples()),
        ]
        out = get_output()
        for name, block in sections:
            out.emit(2, "[section] {name}: {state}", channel='section',
                     name=name, state='included' if block else 'omitted')
        return ''.join(block for _, block in sections) + '\n'

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------
    def generate_header(self) -> str:
        usage = self.cmd.name
        if self.cmd.args_definition:
            usage += ' ' + self.cmd.args_definition
        version = self.cmd.get_version() or DEFAULT_VERSION
        rows = [
            [heading('Usage:'), magenta(usage)],
            [heading('Version:'), yellow(f'v{version}')],
        ]
        return '\n' + layout(rows, TableConfig(indent=self.indent, padding=1)) + '\n'

    def generate_description(self) -> str:
        if not self.cmd.description:
            return ''
        return self._section('Description', [[self.cmd.description]], TableConfig(
            indent=self.indent * 2, padding=1, max_cell_width=140))

    def generate_options(self) -> str:
        options = self.cmd.get_options(hidden=False)
        if not options:
            return ''

        has_types = any(option.type_definition for option in options)
        rows = []
        for option in options:
            row = [', '.join(flag(f) for f in _FLAG_SPLIT_RE.split(option.flags) if f)]
            if has_types:
                row.append(highlight_arguments(option.type_definition))
            row.append(_bullet(first_line(option.description)))
            row.append(generate_hints(option))
            rows.append(row)

        if has_types:
            config = TableConfig(indent=self.indent * 2, padding=[2, 2, 2],
                                 max_cell_width=[60, 60, 80, 60])
        else:
            config = TableConfig(indent=self.indent * 2, padding=[2, 2],
                                 max_cell_width=[60, 80, 60])
        return self._section('Options', rows, config)

    def generate_commands(self) -> str:
        commands = self.cmd.get_commands(hidden=False)
        if not commands:
            return ''

        has_args = any(command.args_definition for command in commands)
        rows = []
        for command in commands:
            row = [', '.join(flag(name) for name in [command.name, *command.aliases])]
            if has_args:
                row.append(highlight_arguments(command.args_definition))
            row.append(_bullet(first_line(command.description)))
            rows.append(row)

        padding = [2, 2, 2] if has_args else [2, 2]
        return self._section('Commands', rows, TableConfig(
            indent=self.indent * 2, padding=padding))

    def generate_environment_variables(self) -> str:
        env_vars = self.cmd.get_env_vars(hidden=False)
        if not env_vars:
            return ''
        rows = [
            [', '.join(flag(name) for name in env_var.names),
             highlight_arguments(env_var.details),
             _bullet(env_var.description)]
            for env_var in env_vars
        ]
        return self._section('Environment variables', rows, TableConfig(
            indent=self.indent * 2, padding=2))

    def generate_examples(self) -> str:
        examples = self.cmd.get_examples()
        if not examples:
            return ''
        rows = [
            [dim(bold(capitalize(example.name) + ':')), '\n' + example.description]
            for example in examples
        ]
        return self._section('Examples', rows, TableConfig(
            indent=self.indent * 2, padding=1, max_cell_width=150))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def label(self, text: str) -> str:
        return '\n' + ' ' * self.indent + heading(text + ':') + '\n\n'

    def _section(self, title: str, rows: List[list], config: TableConfig) -> str:
        return self.label(title) + layout(rows, config) + '\n'


@trace
def generate(command: Command, indent: int = DEFAULT_INDENT) -> str:
    """Render the full help document for a command."""
    return HelpGenerator(command, indent=indent).generate()
