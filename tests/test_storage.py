import pytest

from isismock.storage import FileHistoryStorage, HistoryStorage

V = ["item1", "item2", "item3", "item4", "item5", "item6"]
V2 = ["itemA", "itemB", "itemC", "itemD", "itemE", "itemF"]
EXPECTED = ["item3", "item4", "item5", "item6", "itemA", "itemB", "itemC", "itemD", "itemE", "itemF"]


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "cli_test_history"


def test_basics(history_file):
    s = FileHistoryStorage(history_file, 10)
    s.clear()
    assert s.commands() == []

    s.store(V)
    assert s.commands() == V

    s.store(V2)
    assert s.commands() == EXPECTED


def test_persistence(history_file):
    s = FileHistoryStorage(history_file, 10)
    s.clear()
    assert s.commands() == []

    s.store(V)
    assert s.commands() == V

    s.store(V2)
    assert s.commands() == EXPECTED

    s2 = FileHistoryStorage(history_file, 10)
    assert s2.commands() == EXPECTED

    s2.clear()
    assert s2.commands() == []


def test_missing_file_reads_empty(history_file):
    s = FileHistoryStorage(history_file)
    assert s.commands() == []
    assert not history_file.exists()


def test_file_holds_one_command_per_line(history_file):
    s = FileHistoryStorage(history_file, 10)
    s.store(["show version", "exit"])
    assert history_file.read_text(encoding="utf-8") == "show version\nexit\n"


def test_empty_command_round_trips(history_file):
    s = FileHistoryStorage(history_file, 10)
    s.store(["", "a"])
    assert s.commands() == ["", "a"]


def test_is_history_storage(history_file):
    s = FileHistoryStorage(history_file)
    assert isinstance(s, HistoryStorage)
    with pytest.raises(TypeError):
        HistoryStorage()