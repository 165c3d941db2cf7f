"""cmdhelp table — lay out a JSON list of rows as an aligned text table.

    cmdhelp table rows.json --padding 2 --max-width 20,40
"""

import argparse

from cmdhelp.config import DefinitionError, load_rows_file
from cmdhelp.lib.table_lib import TableConfig, layout
from cmdhelp.output import print_error


def int_list(value):
    """argparse type: '2' -> 2, '2,4' -> [2, 4]."""
    try:
        values = [int(v) for v in value.split(",") if v.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected N or N,N,...: {value!r}")
    if not values:
        raise argparse.ArgumentTypeError("expected at least one number")
    return values[0] if len(values) == 1 else values


def register(subparsers, parents):
    """Register the 'table' subcommand."""
    p = subparsers.add_parser(
        "table",
        parents=parents,
        help="Lay out a JSON list of rows as an aligned table",
        description=(
            "Lay out rows from a JSON file (a list of lists of strings).\n"
            "--padding and --max-width take one number for every column\n"
            "or a comma separated list, one per column."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("file", metavar="FILE", help="JSON rows file")
    p.add_argument("--padding", type=int_list, default=1, metavar="N[,N...]",
                   help="Gap after each column (default: 1)")
    p.add_argument("--max-width", type=int_list, default=None,
                   metavar="N[,N...]",
                   help="Wrap cells wider than this (default: unlimited)")
    p.set_defaults(func=run)


def run(args):
    """Execute the table command."""
    try:
        rows = load_rows_file(args.file)
    except DefinitionError as e:
        print_error(str(e))
        return 1

    indent = args.indent if args.indent is not None else 0
    config = TableConfig(indent=indent, padding=args.padding,
                         max_cell_width=args.max_width)
    text = layout(rows, config)
    if text:
        print(text)
    return 0
