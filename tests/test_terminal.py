import io

from isismock.keyboard import KeyType, decode_keys
from isismock.terminal import Symbol, Terminal


def _type(term, text):
    return [term.keypressed(k, c) for k, c in decode_keys(text)]


def test_typing_and_return_gives_command():
    out = io.StringIO()
    term = Terminal(out)
    results = _type(term, b"show\n")
    assert results[-1] == (Symbol.COMMAND, "show")
    assert all(r == (Symbol.NOTHING, "") for r in results[:-1])
    assert out.getvalue() == "show\r\n"
    assert term.get_line() == ""


def test_backspace_removes_char():
    term = Terminal(io.StringIO())
    _type(term, b"abc\x7f")
    assert term.get_line() == "ab"


def test_backspace_at_start_does_nothing():
    out = io.StringIO()
    term = Terminal(out)
    assert term.keypressed(KeyType.BACKSPACE) == (Symbol.NOTHING, "")
    assert term.get_line() == ""
    assert out.getvalue() == ""


def test_insert_in_the_middle():
    term = Terminal(io.StringIO())
    _type(term, b"ac\x1b[Db")
    assert term.get_line() == "abc"


def test_home_and_delete():
    term = Terminal(io.StringIO())
    _type(term, b"xabc\x1b[H\x1b[3~")
    assert term.get_line() == "abc"


def test_delete_at_end_does_nothing():
    term = Terminal(io.StringIO())
    _type(term, b"abc\x1b[3~")
    assert term.get_line() == "abc"


def test_end_after_home_then_type_appends():
    term = Terminal(io.StringIO())
    _type(term, b"ab\x1b[H\x1b[Fc")
    assert term.get_line() == "abc"


def test_right_moves_cursor():
    term = Terminal(io.StringIO())
    _type(term, b"ac\x1b[H\x1b[Cb")
    assert term.get_line() == "abc"


def test_special_symbols():
    term = Terminal(io.StringIO())
    assert term.keypressed(KeyType.UP) == (Symbol.UP, "")
    assert term.keypressed(KeyType.DOWN) == (Symbol.DOWN, "")
    assert term.keypressed(KeyType.EOF) == (Symbol.EOF, "")
    assert term.keypressed(KeyType.ASCII, "\t") == (Symbol.TAB, "")
    assert term.keypressed(KeyType.IGNORED) == (Symbol.NOTHING, "")


def test_set_line_replaces_and_clears_tail():
    out = io.StringIO()
    term = Terminal(out)
    term.set_line("longer")
    term.set_line("ab")
    assert term.get_line() == "ab"
    assert out.getvalue().endswith("    \b\b\b\b")


def test_set_line_then_return():
    term = Terminal(io.StringIO())
    term.set_line("history item")
    assert term.keypressed(KeyType.RET) == (Symbol.COMMAND, "history item")


def test_reset_cursor_after_set_line():
    out = io.StringIO()
    term = Terminal(out)
    term.set_line("abc")
    term.reset_cursor()
    before = out.getvalue()
    term.keypressed(KeyType.HOME)
    assert out.getvalue() == before


def test_before_and_after_input_wrap_typed_text():
    out = io.StringIO()
    term = Terminal(out, before_input="[", after_input="]")
    term.keypressed(KeyType.ASCII, "a")
    assert out.getvalue() == "[a]"