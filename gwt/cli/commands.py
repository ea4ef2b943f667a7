"""Subcommands and their aliases."""

from enum import Enum
from typing import Optional


class Command(Enum):
    """A gwt subcommand: (canonical name, aliases, argument, description)."""

    ADD = ("add", ("a",), "<name>", "create a worktree and connect to it")
    LIST = ("list", ("ls", "l"), "", "list managed worktrees")
    SWITCH = ("switch", ("sw", "s"), "[name]", "connect to an existing worktree")
    REMOVE = ("remove", ("rm", "r"), "<name>", "remove a worktree and its session")
    CLEANUP = ("cleanup", ("cl", "c"), "", "delete managed branches with no worktree")

    def __init__(self, command_name: str, aliases: tuple, argument: str, description: str):
        self.command_name = command_name
        self.aliases = aliases
        self.argument = argument
        self.description = description

    @property
    def requires_name(self) -> bool:
        return self.argument.startswith("<")


_COMMANDS_BY_TOKEN = {
    token: command
    for command in Command
    for token in (command.command_name, *command.aliases)
}


def resolve_command(token: str) -> Optional[Command]:
    """Look up a subcommand by name or alias."""
    return _COMMANDS_BY_TOKEN.get(token)


def usage_text() -> str:
    lines = ["Usage:"]
    entries = []
    for command in Command:
        invocation = "|".join((command.command_name, *command.aliases))
        entries.append((f"gwt {invocation} {command.argument}".rstrip(), command.description))
    width = max(len(invocation) for invocation, _ in entries)
    for invocation, description in entries:
        lines.append(f"  {invocation:<{width}}  # {description}")
    return "\n".join(lines)
