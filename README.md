# isismock

`isismock` is a set of building blocks for tools that speak IS-IS. It gives you the PDU
headers and TLVs, and a menu-driven interactive command line to drive them. It uses only
the standard library and needs Python 3.10 or later.

## What is in the package

| Module | Contents |
| --- | --- |
| `isismock.isis` | Fixed-layout headers and TLVs, all subclasses of `Block`. The enums `Level`, `PacketType` and `AdjacencyState`. The constants `ALL_ISS`, `OUR_MAC`, `EXTENDED_CIRCUIT_ID`, `START_LSP_ID` and `END_LSP_ID`. |
| `isismock.commands` | `Command`, `FunctionCommand`, `FreeformCommand`, `Menu`, `CmdHandler` and `get_completions`. |
| `isismock.cli` | `Cli`, `CliSession` and the broadcasting `OutStream`. |
| `isismock.fromstring` | `from_string`, `ArgType` and `ConversionError`, for strict conversion of command words. |
| `isismock.history` | `History`, the command history with browsing. |
| `isismock.storage` | The `HistoryStorage` interface and the persistent `FileHistoryStorage`. |
| `isismock.terminal` | `Terminal` and `Symbol`, for line editing that echoes to a text stream. |
| `isismock.keyboard` | `KeyType`, and `decode_keys`, which turns raw terminal bytes into key events. |
| `isismock.scheduler` | `LoopScheduler`, a small thread-safe task loop. |

## Building packets

Every header and TLV is a `Block`:

- A new block starts with its protocol defaults.
- Its fields are plain attributes. You can also set them as keyword arguments to the
  constructor.
- `to_bytes()` (or `bytes(block)`) gives the wire form.
- `Block.from_bytes()` reads a block from the start of a byte string.

Setting a field to a value out of range, or to bytes of the wrong length, raises
`ValueError`.

```python
from isismock.isis import ALL_ISS, EthHeader, IsisHeader, PacketType

eth = EthHeader()
isis = IsisHeader(pdu_type=PacketType.P2P_HELLO)
frame = eth.to_bytes() + isis.to_bytes()

assert frame[:6] == ALL_ISS            # all-IS multicast destination by default
assert IsisHeader.from_bytes(isis.to_bytes()) == isis
```

Some TLVs have a variable length: `Tlv137` (hostname), `Tlv129Ext` (several NLPIDs) and
`Tlv1Ext` (area address). Each of them puts its length byte plus two bytes on the wire.
`LspHeader` and `Tlv14` store their 16-bit fields low byte first. The other headers store
them in network order.

## A menu-driven console

A session is built in three steps:

1. Insert handlers into a `Menu`. A handler is called as `handler(out, *args)`, where
   `out` is the session's output stream. Its arguments are converted according to
   `arg_types`. If `arg_types` is exactly `[ArgType.STRING_LIST]`, the handler receives
   all the remaining words as one list.
2. Add sub-menus with `Menu.insert_command`.
3. Give the root menu to a `Cli` and open a `CliSession` on an output stream.

```python
import io

from isismock.cli import Cli, CliSession
from isismock.commands import Menu
from isismock.fromstring import ArgType

root = Menu("demo")
root.insert("add", lambda out, a, b: out.write(f"{a + b}\n"), "add two numbers",
            arg_types=[ArgType.INT, ArgType.INT])

out = io.StringIO()
with CliSession(Cli(root), out) as session:
    session.feed("add 2 3")
    assert session.completions("a") == ["add"]

assert out.getvalue() == "5\n"
```

### How a session handles input

- Every session has the global commands `help` and `exit`. Pass `history_command=True`
  to add a `history` command as well.
- A line that matches no command, or whose words do not convert to the handler's types,
  gets the answer `wrong command: <line>`.
- An exception raised by a handler goes to `Cli.exception_handler` if one is set.
  Otherwise its message is written to the session.
- Typing a menu's name makes it the current menu. `prompt()` writes that menu's prompt
  followed by `> `.

### What a session offers

- `help()` lists the commands available in the current menu.
- `completions()` gives the sorted, distinct completions of a line.
- `previous_cmd()` and `next_cmd()` browse the history.
- `enter()` and `exit()` run the enter and exit actions: first the session's own, then
  the `Cli` ones. `exit()` also saves the commands of the session into the `Cli`'s
  history storage.
- `Cli.cout()` returns an `OutStream` that writes to every open session. `close()`
  detaches a session from it, and leaving a `with` block calls `close()` for you.

### Managing inserted commands

`Menu.insert` and `Menu.insert_command` return a `CmdHandler`. Use it to `enable()`,
`disable()` or `remove()` that command later.

## Converting words

`from_string(text, kind)` accepts only text that fits `kind` exactly:

- Integers must be in range for the named C-sized type.
- Floats must not contain white space.
- `bool` accepts `true`, `false`, `1` and `0`.

Anything else raises `ConversionError`, which is a `ValueError`. `ArgType.STRING_LIST`
cannot be converted from a single word, and asking for it raises `TypeError`.

## History

`History` keeps the most recent commands, newest first:

- A command that repeats the one just before it is not stored again.
- An edit made while browsing is stored in place of the entry being browsed.

`FileHistoryStorage` keeps up to a fixed number of commands in a plain text file, one per
line, so that the history survives a restart:

```python
from isismock.storage import FileHistoryStorage

storage = FileHistoryStorage("history.txt", 10)
storage.store(["item1", "item2"])
assert storage.commands() == ["item1", "item2"]
storage.clear()
```

A `Cli` given no storage keeps its history in memory only.

## Line editing and keys

`decode_keys(data)` yields `(KeyType, char)` pairs from raw terminal bytes. It recognises:

- arrows, Home, End and Delete;
- backspace;
- return;
- end-of-transmission (Ctrl-D).

`Terminal.keypressed(key, char)` applies one key to the line being edited and echoes the
change to its stream. It returns a `Symbol`:

- `COMMAND`, together with the finished line, on return;
- `UP` or `DOWN` for history browsing;
- `TAB` for completion;
- `EOF` at end of input.

## Scheduling work

```python
from isismock.scheduler import LoopScheduler

scheduler = LoopScheduler()
results = []
scheduler.post(lambda: results.append("done"))
scheduler.exec_one()
assert results == ["done"]
```

- `run()` keeps executing tasks until `stop()` is called.
- `poll_one()` runs one waiting task if there is one, and returns at once if there is
  not.

## What the package does not do

There is no command to run and no ready-made mocker. The package does not:

- open network interfaces or send and receive frames;
- compute LSP checksums;
- flood LSPs or keep adjacency state machines;
- read JSON link-state databases;
- put the terminal into raw mode or read keys from it by itself;
- serve sessions over telnet.

These pieces are left to the application. It has to read the keyboard, feed the bytes
through `decode_keys` and `Terminal`, and pass finished lines to `CliSession.feed`.