"""Argument placeholder parsing and highlighting.

An arguments definition is a space separated list of placeholders:

    <name:type>      required argument
    [name:type]      optional argument
    <name...:type>   variadic argument
    <name:type[]>    list value

The type defaults to ``string`` when omitted. Tokens that are not
bracketed placeholders are passed through untouched.
"""

import re
from dataclasses import dataclass
from typing import List, Optional

from cmdhelp.styles import green, magenta, red, yellow


_PLACEHOLDER_RE = re.compile(r"^(?P<open>[<\[])(?P<body>[^<>\[\]]*(?:\[\])?)(?P<close>[>\]])$")


@dataclass
class ArgumentDetails:
    """One parsed placeholder from an arguments definition."""
    name: str
    type: str = 'string'
    optional_value: bool = False
    variadic: bool = False
    list: bool = False
    raw: Optional[str] = None


def parse_argument(token: str) -> Optional[ArgumentDetails]:
    """Parse a single placeholder token, or return None if it isn't one."""
    match = _PLACEHOLDER_RE.match(token)
    if not match:
        return None
    optional = match.group('open') == '['
    if optional != (match.group('close') == ']'):
        return None

    name, _, arg_type = match.group('body').partition(':')
    arg_type = arg_type or 'string'
    is_list = arg_type.endswith('[]')
    if is_list:
        arg_type = arg_type[:-2] or 'string'
    variadic = name.endswith('...')
    if variadic:
        name = name[:-3]

    return ArgumentDetails(name=name, type=arg_type, optional_value=optional,
                           variadic=variadic, list=is_list, raw=token)


def parse_arguments_definition(definition: Optional[str]) -> List[ArgumentDetails]:
    """Parse every placeholder of an arguments definition.

    Tokens that are not placeholders are kept as ArgumentDetails with an
    empty name and ``raw`` set, so highlighting can pass them through.
    """
    details = []
    for token in (definition or '').split():
        parsed = parse_argument(token)
        details.append(parsed if parsed else ArgumentDetails(name='', raw=token))
    return details


def highlight_argument_details(arg: ArgumentDetails) -> str:
    """Style one placeholder: brackets and colon yellow, name magenta, type red."""
    if not arg.name and arg.raw is not None:
        return arg.raw
    name = arg.name + ('...' if arg.variadic else '')
    text = yellow('[' if arg.optional_value else '<')
    text += magenta(name)
    text += yellow(':')
    text += red(arg.type)
    if arg.list:
        text += green('[]')
    text += yellow(']' if arg.optional_value else '>')
    return text


def highlight_arguments(definition: Optional[str]) -> str:
    """Highlight a whole arguments definition; empty input gives ''."""
    return ' '.join(highlight_argument_details(arg)
                    for arg in parse_arguments_definition(definition))
