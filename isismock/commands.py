"""Commands and menus of the interactive command line."""

from __future__ import annotations

import abc
import weakref
from typing import Any, Callable, Iterable, Optional, Sequence, TextIO

from isismock.fromstring import ArgType, ConversionError, from_string

__all__ = [
    "Command",
    "get_completions",
    "CmdHandler",
    "FunctionCommand",
    "FreeformCommand",
    "Menu",
]


class Command(abc.ABC):
    """A named entry of a menu that a session can execute.

    A session passed to :meth:`exec` provides an ``out`` text stream and a
    writable ``current`` attribute holding the active menu.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        self._enabled = True

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        """Make the command available again."""
        self._enabled = True

    def disable(self) -> None:
        """Hide the command from execution, help and completion."""
        self._enabled = False

    @abc.abstractmethod
    def exec(self, cmd_line: Sequence[str], session: Any) -> bool:
        """Run the command if ``cmd_line`` names it; return whether it did."""

    @abc.abstractmethod
    def help(self, out: TextIO) -> None:
        """Write the help entry of the command to ``out``."""

    def completion_recursive(self, line: str) -> list[str]:
        """Return the completions of ``line`` this command offers."""
        if not self._enabled:
            return []
        if self._name.startswith(line):
            return [self._name]
        return []


def get_completions(commands: Iterable[Command], line: str) -> list[str]:
    """Collect the completions of ``line`` from every command, in order."""
    return [c for cmd in commands for c in cmd.completion_recursive(line)]


class CmdHandler:
    """Handle to an inserted command, able to enable, disable or remove it.

    The handle does not keep the command or its menu alive; once either is
    gone the operations do nothing.
    """

    def __init__(self, command: Optional[Command] = None, owner: Optional["Menu"] = None) -> None:
        self._command = weakref.ref(command) if command is not None else None
        self._owner = weakref.ref(owner) if owner is not None else None

    def _target(self) -> Optional[Command]:
        return self._command() if self._command is not None else None

    def enable(self) -> None:
        command = self._target()
        if command is not None:
            command.enable()

    def disable(self) -> None:
        command = self._target()
        if command is not None:
            command.disable()

    def remove(self) -> None:
        command = self._target()
        owner = self._owner() if self._owner is not None else None
        if command is not None and owner is not None:
            owner._remove(command)


def _write_help(out: TextIO, name: str, types: Iterable[ArgType],
                param_desc: Sequence[str], description: str) -> None:
    parts = [" - ", name]
    if not param_desc:
        parts.extend(" " + t.description() for t in types)
    parts.extend(f" <{s}>" for s in param_desc)
    parts.append(f"\n\t{description}\n")
    out.write("".join(parts))


class FunctionCommand(Command):
    """A command taking a fixed list of typed parameters."""

    def __init__(self, name: str, func: Callable[..., Any], description: str = "",
                 param_desc: Sequence[str] = (), arg_types: Sequence[ArgType] = ()) -> None:
        super().__init__(name)
        self._func = func
        self._description = description
        self._param_desc = tuple(param_desc)
        self._arg_types = tuple(arg_types)

    def exec(self, cmd_line: Sequence[str], session: Any) -> bool:
        if not self.enabled:
            return False
        if len(cmd_line) != len(self._arg_types) + 1:
            return False
        if cmd_line[0] != self.name:
            return False
        try:
            args = [from_string(word, kind) for word, kind in zip(cmd_line[1:], self._arg_types)]
        except ConversionError:
            return False
        self._func(session.out, *args)
        return True

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        _write_help(out, self.name, self._arg_types, self._param_desc, self._description)


class FreeformCommand(Command):
    """A command receiving every following word as a list of strings."""

    def __init__(self, name: str, func: Callable[[TextIO, list[str]], Any],
                 description: str = "", param_desc: Sequence[str] = ()) -> None:
        super().__init__(name)
        self._func = func
        self._description = description
        self._param_desc = tuple(param_desc)

    def exec(self, cmd_line: Sequence[str], session: Any) -> bool:
        if not self.enabled:
            return False
        if cmd_line[0] != self.name:
            return False
        self._func(session.out, list(cmd_line[1:]))
        return True

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        _write_help(out, self.name, (ArgType.STRING_LIST,), self._param_desc, self._description)


class Menu(Command):
    """A command grouping sub-commands; entering it changes the prompt."""

    def __init__(self, name: str = "", description: str = "(menu)", prompt: str = "") -> None:
        super().__init__(name)
        self._description = description
        self._prompt = prompt or name
        self._parent: Optional[Menu] = None
        self._commands: list[Command] = []

    @property
    def prompt(self) -> str:
        return self._prompt

    @property
    def parent(self) -> Optional["Menu"]:
        return self._parent

    @property
    def commands(self) -> tuple[Command, ...]:
        return tuple(self._commands)

    def insert(self, name: str, handler: Callable[..., Any], help: str = "",
               param_desc: Optional[Sequence[str]] = None,
               arg_types: Optional[Sequence[ArgType]] = None) -> CmdHandler:
        """Add a command calling ``handler(out, *args)``.

        With ``arg_types`` of exactly ``[ArgType.STRING_LIST]`` the handler
        receives all following words as one list.
        """
        param_desc = tuple(param_desc or ())
        arg_types = tuple(arg_types or ())
        if arg_types == (ArgType.STRING_LIST,):
            command: Command = FreeformCommand(name, handler, help, param_desc)
        else:
            command = FunctionCommand(name, handler, help, param_desc, arg_types)
        return self.insert_command(command)

    def insert_command(self, command: Command) -> CmdHandler:
        """Add an already built command or sub-menu."""
        if isinstance(command, Menu):
            command._parent = self
        self._commands.append(command)
        return CmdHandler(command, self)

    def _remove(self, command: Command) -> None:
        for i, cmd in enumerate(self._commands):
            if cmd is command:
                del self._commands[i]
                return

    def exec(self, cmd_line: Sequence[str], session: Any) -> bool:
        if not self.enabled:
            return False
        if cmd_line[0] == self.name:
            if len(cmd_line) == 1:
                session.current = self
                return True
            sub_line = list(cmd_line[1:])
            return any(cmd.exec(sub_line, session) for cmd in list(self._commands))
        return False

    def scan_cmds(self, cmd_line: Sequence[str], session: Any) -> bool:
        """Run the first sub-command matching ``cmd_line``, else try the parent."""
        if not self.enabled:
            return False
        if any(cmd.exec(cmd_line, session) for cmd in list(self._commands)):
            return True
        return self._parent is not None and self._parent.exec(cmd_line, session)

    def main_help(self, out: TextIO) -> None:
        """Write help for every sub-command, followed by the parent entry."""
        if not self.enabled:
            return
        for cmd in self._commands:
            cmd.help(out)
        if self._parent is not None:
            self._parent.help(out)

    def help(self, out: TextIO) -> None:
        if not self.enabled:
            return
        out.write(f" - {self.name}\n\t{self._description}\n")

    def completions(self, line: str) -> list[str]:
        """Completions from the sub-commands, then from the parent menu."""
        result = get_completions(self._commands, line)
        if self._parent is not None:
            result.extend(self._parent.completion_recursive(line))
        return result

    def completion_recursive(self, line: str) -> list[str]:
        if line.startswith(self.name):
            rest = line[len(self.name):].lstrip()
            return [
                f"{self.name} {c}"
                for cmd in self._commands
                for c in cmd.completion_recursive(rest)
            ]
        return super().completion_recursive(line)