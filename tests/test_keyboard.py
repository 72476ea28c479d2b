from isismock.keyboard import KeyType, decode_keys


def test_plain_ascii():
    assert list(decode_keys(b"ab")) == [(KeyType.ASCII, "a"), (KeyType.ASCII, "b")]


def test_str_input_is_accepted():
    assert list(decode_keys("x")) == [(KeyType.ASCII, "x")]


def test_arrow_keys():
    keys = [k for k, _ in decode_keys(b"\x1b[A\x1b[B\x1b[D\x1b[C")]
    assert keys == [KeyType.UP, KeyType.DOWN, KeyType.LEFT, KeyType.RIGHT]


def test_home_end():
    keys = [k for k, _ in decode_keys(b"\x1b[H\x1b[F")]
    assert keys == [KeyType.HOME, KeyType.END]


def test_delete_key():
    assert [k for k, _ in decode_keys(b"\x1b[3~")] == [KeyType.CANC]


def test_delete_prefix_without_tilde_is_ignored():
    assert [k for k, _ in decode_keys(b"\x1b[3x")] == [KeyType.IGNORED]


def test_unknown_csi_is_ignored():
    assert [k for k, _ in decode_keys(b"\x1b[Z")] == [KeyType.IGNORED]


def test_escape_without_bracket_consumes_next_byte():
    assert [k for k, _ in decode_keys(b"\x1bOa")] == [KeyType.IGNORED, KeyType.ASCII]


def test_control_keys():
    keys = [k for k, _ in decode_keys(bytes([127, 8, 10, 4]))]
    assert keys == [KeyType.BACKSPACE, KeyType.BACKSPACE, KeyType.RET, KeyType.EOF]


def test_tab_is_ascii():
    assert list(decode_keys(b"\t")) == [(KeyType.ASCII, "\t")]


def test_truncated_escape_sequence():
    assert [k for k, _ in decode_keys(b"\x1b")] == [KeyType.IGNORED]
    assert [k for k, _ in decode_keys(b"\x1b[")] == [KeyType.IGNORED]


def test_empty_input():
    assert list(decode_keys(b"")) == []