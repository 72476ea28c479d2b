"""Interactive command-line sessions built on menus of commands."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TextIO

from isismock.commands import Menu
from isismock.history import History
from isismock.storage import HistoryStorage

__all__ = ["OutStream", "Cli", "CliSession"]

Action = Callable[[TextIO], object]
ExceptionHandler = Callable[[TextIO, str, Exception], object]


class OutStream:
    """A text stream that copies everything written to every registered stream."""

    def __init__(self) -> None:
        self._streams: list[TextIO] = []

    def register(self, stream: TextIO) -> None:
        """Start copying output to ``stream``."""
        self._streams.append(stream)

    def unregister(self, stream: TextIO) -> None:
        """Stop copying output to ``stream``."""
        self._streams = [s for s in self._streams if s is not stream]

    def write(self, text: str) -> int:
        """Write ``text`` to every registered stream."""
        for stream in list(self._streams):
            stream.write(text)
        return len(text)

    def flush(self) -> None:
        for stream in list(self._streams):
            stream.flush()


class _VolatileHistoryStorage(HistoryStorage):
    """History kept in memory only, bounded in length."""

    def __init__(self, size: int = 1000) -> None:
        self._max_size = size
        self._commands: list[str] = []

    def store(self, commands: Iterable[str]) -> None:
        self._commands.extend(commands)
        if len(self._commands) > self._max_size:
            del self._commands[: len(self._commands) - self._max_size]

    def commands(self) -> list[str]:
        return list(self._commands)

    def clear(self) -> None:
        self._commands.clear()


class Cli:
    """The command tree shared by every session, with its global actions.

    ``enter_action`` and ``exit_action`` are called with the session output
    stream when any session starts or exits; ``exception_handler`` is called
    with the output stream, the command line and the exception raised by a
    command handler.
    """

    _cout: Optional[OutStream] = None

    def __init__(self, root_menu: Menu, history_storage: Optional[HistoryStorage] = None) -> None:
        self.root_menu = root_menu
        self.history_storage = history_storage if history_storage is not None else _VolatileHistoryStorage()
        self.enter_action: Optional[Action] = None
        self.exit_action: Optional[Action] = None
        self.exception_handler: Optional[ExceptionHandler] = None

    @classmethod
    def cout(cls) -> OutStream:
        """Return the stream that writes to every connected session."""
        if Cli._cout is None:
            Cli._cout = OutStream()
        return Cli._cout

    def handle_exception(self, out: TextIO, cmd: str, exc: Exception) -> None:
        """Report an exception raised while handling ``cmd``."""
        if self.exception_handler is not None:
            self.exception_handler(out, cmd, exc)
        else:
            out.write(f"{exc}\n")

    def _enter(self, out: TextIO) -> None:
        if self.enter_action is not None:
            self.enter_action(out)

    def _exit(self, out: TextIO) -> None:
        if self.exit_action is not None:
            self.exit_action(out)


class CliSession:
    """One user's conversation with a :class:`Cli`, writing to ``out``."""

    def __init__(self, cli: Cli, out: TextIO, history_size: int = 100,
                 history_command: bool = False,
                 before_prompt: str = "", after_prompt: str = "") -> None:
        self.cli = cli
        self.out = out
        self.current: Menu = cli.root_menu
        self.enter_action: Optional[Action] = None
        self.exit_action: Optional[Action] = None
        self.before_prompt = before_prompt
        self.after_prompt = after_prompt
        self._history = History(history_size)
        self._exited = False
        self._closed = False

        self._history.load_commands(cli.history_storage.commands())
        Cli.cout().register(out)

        self._global_menu = Menu()
        self._global_menu.insert("help", lambda _out: self.help(), "This help message")
        self._global_menu.insert("exit", lambda _out: self.exit(), "Quit the session")
        if history_command:
            self._global_menu.insert("history", lambda _out: self.show_history(), "Show the history")

    @property
    def exited(self) -> bool:
        return self._exited

    def close(self) -> None:
        """Detach the session output from the global stream."""
        if not self._closed:
            Cli.cout().unregister(self.out)
            self._closed = True

    def __enter__(self) -> "CliSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def feed(self, cmd: str) -> None:
        """Execute one command line typed by the user."""
        words = cmd.split()
        if not words:
            return
        self._history.new_command(cmd)
        try:
            found = self._global_menu.scan_cmds(words, self)
            if not found:
                found = self.current.scan_cmds(words, self)
            if not found:
                self.out.write(f"wrong command: {cmd}\n")
        except Exception as exc:  # noqa: BLE001 - reported to the user
            self.cli.handle_exception(self.out, cmd, exc)

    def prompt(self) -> None:
        """Show the prompt of the current menu, unless the session exited."""
        if self._exited:
            return
        self.out.write(f"{self.before_prompt}{self.current.prompt}{self.after_prompt}> ")
        self.out.flush()

    def help(self) -> None:
        """Write the commands available in the current menu."""
        self.out.write("Commands available:\n")
        self._global_menu.main_help(self.out)
        self.current.main_help(self.out)

    def enter(self) -> None:
        """Run the global and the session enter actions."""
        self.cli._enter(self.out)
        if self.enter_action is not None:
            self.enter_action(self.out)

    def exit(self) -> None:
        """Run the exit actions, save the history and stop prompting."""
        if self.exit_action is not None:
            self.exit_action(self.out)
        self.cli._exit(self.out)
        self.cli.history_storage.store(self._history.get_commands())
        self._exited = True

    def show_history(self) -> None:
        """Write the command history to the session output."""
        self._history.show(self.out)

    def previous_cmd(self, line: str) -> str:
        """Return the previous history entry, keeping ``line`` as the edited one."""
        return self._history.previous(line)

    def next_cmd(self) -> str:
        """Return the next history entry."""
        return self._history.next()

    def completions(self, line: str) -> list[str]:
        """Return the sorted, distinct completions of ``line``."""
        line = line.lstrip()
        result = self._global_menu.completions(line) + self.current.completions(line)
        return sorted(set(result))