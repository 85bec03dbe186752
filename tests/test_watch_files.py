import io
import sys

import pytest

from labstructs.watch import WristWatch
from labstructs.watch_files import (
    FILE_NAMES,
    RECORD_SIZE,
    append_sentence,
    append_watch_binary,
    append_watch_text,
    create_missing_files,
    format_watch_rows,
    load_array,
    load_sentences,
    load_text,
    load_watches_binary,
    load_watches_text,
    main,
    save_array,
    save_text,
)

OMEGA = WristWatch(25, 5000, "O", False, "Omega", (2, 2, 3, 5, 0, -4))
TAG = WristWatch(10, 3000.5, "T", False, "Tag Heuer", (0, 0, 0, 0, 0, 0))


def test_create_missing_files_creates_only_once(tmp_path):
    created = create_missing_files(tmp_path, FILE_NAMES)
    assert sorted(p.name for p in created) == sorted(FILE_NAMES)
    assert all((tmp_path / name).exists() for name in FILE_NAMES)
    assert create_missing_files(tmp_path, FILE_NAMES) == []


def test_create_missing_files_keeps_existing_content(tmp_path):
    (tmp_path / "a.txt").write_text("kept", encoding="utf-8")
    created = create_missing_files(tmp_path, ["a.txt", "b.txt"])
    assert [p.name for p in created] == ["b.txt"]
    assert (tmp_path / "a.txt").read_text(encoding="utf-8") == "kept"


def test_text_round_trip_keeps_whitespace(tmp_path):
    path = tmp_path / "t.txt"
    text = "  A paragraph\twith spaces  "
    save_text(path, text)
    assert load_text(path) == text
    save_text(path, "short")
    assert load_text(path) == "short"


def test_array_uses_brace_separator(tmp_path):
    path = tmp_path / "a.txt"
    save_array(path, [1.5, -2.0, 3.25])
    assert path.read_text(encoding="utf-8") == "1.5}-2}3.25}"
    assert load_array(path) == [1.5, -2.0, 3.25]


def test_empty_array(tmp_path):
    path = tmp_path / "a.txt"
    save_array(path, [])
    assert load_array(path) == []


def test_watch_text_round_trip(tmp_path):
    path = tmp_path / "w.txt"
    append_watch_text(path, OMEGA)
    append_watch_text(path, TAG)
    assert load_watches_text(path) == [OMEGA, TAG]
    assert len(path.read_text(encoding="utf-8").splitlines()) == 22


def test_watch_text_ignores_incomplete_record(tmp_path):
    path = tmp_path / "w.txt"
    append_watch_text(path, OMEGA)
    with open(path, "a", encoding="utf-8") as stream:
        stream.write("7\n12\n")
    assert load_watches_text(path) == [OMEGA]


def test_watch_text_bad_numbers_become_zero(tmp_path):
    path = tmp_path / "w.txt"
    path.write_text("x\ny\n\nfalse\nNoName\n1\n2\n3\n4\n5\nz\n", encoding="utf-8")
    (watch,) = load_watches_text(path)
    assert watch.number_of_diamonds == 0
    assert watch.price == 0.0
    assert watch.model == " "
    assert watch.world_time_offsets == (1, 2, 3, 4, 5, 0)


def test_format_watch_rows():
    assert format_watch_rows([OMEGA], "|") == "25|5000|O|false|Omega|2|2|3|5|0|-4\n"
    rows = format_watch_rows([OMEGA, TAG], ";").splitlines()
    assert len(rows) == 2
    assert all(row.count(";") == 10 for row in rows)


def test_watch_binary_round_trip(tmp_path):
    path = tmp_path / "w.bin"
    append_watch_binary(path, OMEGA)
    append_watch_binary(path, TAG)
    assert path.stat().st_size == 2 * RECORD_SIZE
    assert load_watches_binary(path) == [OMEGA, TAG]


def test_watch_binary_keeps_exact_price(tmp_path):
    path = tmp_path / "w.bin"
    watch = WristWatch(100, 15000.75, "C", True, "Cartier", (1, 1, 1, 1, 1, 1))
    append_watch_binary(path, watch)
    assert load_watches_binary(path)[0].price == 15000.75


def test_watch_binary_truncated_raises(tmp_path):
    path = tmp_path / "w.bin"
    append_watch_binary(path, OMEGA)
    with open(path, "ab") as stream:
        stream.write(b"\x01\x02")
    with pytest.raises(ValueError):
        load_watches_binary(path)


def test_sentences_round_trip(tmp_path):
    path = tmp_path / "s.txt"
    append_sentence(path, "First one.")
    append_sentence(path, "Second one.")
    assert load_sentences(path) == ["First one.", "Second one."]


def test_main_saves_and_loads_sentence(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("9\nhello world\n10\n0\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "hello world" in out
    assert load_sentences(tmp_path / FILE_NAMES[4]) == ["hello world"]


def test_main_rejects_invalid_choice(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("42\n0\n"))
    assert main(["-d", str(tmp_path)]) == 0
    assert "Please enter a number between 0 and 10." in capsys.readouterr().out


def test_main_saves_watch_to_binary(tmp_path, monkeypatch):
    answers = "7\nOmega\nO\n25\n5000\nn\n2\n2\n3\n5\n0\n-4\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(answers))
    assert main(["-d", str(tmp_path)]) == 0
    assert load_watches_binary(tmp_path / FILE_NAMES[3]) == [OMEGA]