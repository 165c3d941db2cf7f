"""cmdhelp render — print the help text of a command definition.

Loads a JSON command definition, optionally walks down to a
sub-command, and prints its generated help to stdout::

    cmdhelp render app.json
    cmdhelp render app.json --command "remote add"
"""

import argparse

from cmdhelp import styles
from cmdhelp.config import DefinitionError, load_command_file, resolve_settings
from cmdhelp.help import generate
from cmdhelp.output import print_error


def register(subparsers, parents):
    """Register the 'render' subcommand."""
    p = subparsers.add_parser(
        "render",
        parents=parents,
        help="Render help text from a JSON command definition",
        description=(
            "Render the help text of a command described in a JSON file.\n"
            "Use --command to render one of its sub-commands instead."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", metavar="FILE",
                   help="JSON command definition")
    p.add_argument("--command", dest="command_path", metavar="PATH",
                   default=None,
                   help="Space separated sub-command names or aliases")
    p.set_defaults(func=run)


def find_command(root, path):
    """Walk down from root following space separated names or aliases.

    Raises:
        DefinitionError: a name along the path doesn't exist.
    """
    command = root
    for name in (path or "").split():
        child = command.get_command(name)
        if child is None:
            raise DefinitionError(
                f"Unknown command '{name}' under '{command.name}'")
        command = child
    return command


def run(args):
    """Execute the render command."""
    try:
        root = load_command_file(args.file)
        command = find_command(root, args.command_path)
    except DefinitionError as e:
        print_error(str(e))
        return 1

    settings = resolve_settings(args)
    previous = styles.get_color_enabled()
    styles.set_color_enabled(settings["color"])
    try:
        print(generate(command, indent=settings["indent"]), end="")
    finally:
        styles.set_color_enabled(previous)
    return 0
