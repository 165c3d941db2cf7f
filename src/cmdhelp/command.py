"""Command description model.

A Command is a node in a tree of sub-commands. The root owns the tree;
each child keeps a non-owning ``parent`` reference used only to inherit
the version and global options / environment variables.

All get_*() queries are read-only and return fresh lists.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


class _Unset:
    """Marker for an option without a default value."""

    def __repr__(self):
        return 'UNSET'

    def __bool__(self):
        return False


UNSET: Any = _Unset()


@dataclass
class Option:
    """A flag or option of a command."""
    flags: str
    description: str = ''
    type_definition: Optional[str] = None
    required: bool = False
    default: Any = UNSET
    depends: List[str] = field(default_factory=list)
    conflicts: List[str] = field(default_factory=list)
    hidden: bool = False
    is_global: bool = False

    @property
    def has_default(self) -> bool:
        """True when a default is defined, even a falsy one like 0 or ''."""
        return self.default is not UNSET

    @property
    def flag_list(self) -> List[str]:
        """Individual flags, e.g. ['-f', '--file'] for '-f, --file'."""
        return [f for f in self.flags.replace(',', ' ').split() if f]

    @property
    def name(self) -> str:
        """Longest flag without its leading dashes."""
        flags = self.flag_list
        if not flags:
            return ''
        return max(flags, key=len).lstrip('-')


@dataclass
class EnvVar:
    """An environment variable read by a command."""
    names: List[str]
    details: str = ''
    description: str = ''
    hidden: bool = False
    is_global: bool = False


@dataclass
class Example:
    """A named usage example."""
    name: str
    description: str = ''


@dataclass
class Command:
    """A command and its directly attached options, commands and metadata."""
    name: str
    version: Optional[str] = None
    description: str = ''
    args_definition: Optional[str] = None
    aliases: List[str] = field(default_factory=list)
    options: List[Option] = field(default_factory=list)
    commands: List["Command"] = field(default_factory=list)
    env_vars: List[EnvVar] = field(default_factory=list)
    examples: List[Example] = field(default_factory=list)
    hidden: bool = False
    parent: Optional["Command"] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        for child in self.commands:
            child.parent = self

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------
    def add_command(self, command: "Command") -> "Command":
        """Attach a sub-command and return it."""
        command.parent = self
        self.commands.append(command)
        return command

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def ancestors(self) -> List["Command"]:
        """Parents from nearest to root."""
        chain = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain

    def get_version(self) -> Optional[str]:
        """Own version, else the nearest ancestor's."""
        if self.version:
            return self.version
        for ancestor in self.ancestors():
            if ancestor.version:
                return ancestor.version
        return None

    def get_options(self, hidden: bool = False) -> List[Option]:
        """Own options followed by global options inherited from ancestors.

        An inherited option is skipped when an option of the same name is
        already listed. Hidden options are left out unless hidden=True.
        """
        options = [o for o in self.options if hidden or not o.hidden]
        names = {o.name for o in self.options}
        for ancestor in self.ancestors():
            for option in ancestor.options:
                if not option.is_global or option.name in names:
                    continue
                names.add(option.name)
                if hidden or not option.hidden:
                    options.append(option)
        return options

    def get_commands(self, hidden: bool = False) -> List["Command"]:
        """Direct sub-commands, without hidden ones unless hidden=True."""
        return [c for c in self.commands if hidden or not c.hidden]

    def get_command(self, name: str, hidden: bool = True) -> Optional["Command"]:
        """Find a direct sub-command by name or alias."""
        for command in self.get_commands(hidden):
            if name == command.name or name in command.aliases:
                return command
        return None

    def get_env_vars(self, hidden: bool = False) -> List[EnvVar]:
        """Own environment variables followed by inherited global ones."""
        env_vars = [e for e in self.env_vars if hidden or not e.hidden]
        seen = {n for e in self.env_vars for n in e.names}
        for ancestor in self.ancestors():
            for env_var in ancestor.env_vars:
                if not env_var.is_global or seen.intersection(env_var.names):
                    continue
                seen.update(env_var.names)
                if hidden or not env_var.hidden:
                    env_vars.append(env_var)
        return env_vars

    def get_examples(self) -> List[Example]:
        return list(self.examples)
