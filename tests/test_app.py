import io
import os
import time

import pytest

from filetop import app
from filetop.config import ListerConfig, build_config
from filetop.models import Entry
from filetop.ordering import ConfigError, ValueType
from filetop.utils import format_bytes, format_count, format_timestamp


def _tree(root):
    (root / "small.txt").write_bytes(b"s" * 10)
    (root / "big.bin").write_bytes(b"b" * 4096)
    (root / ".dot").mkdir()
    (root / ".dot" / "huge").write_bytes(b"h" * 100000)


def _run(argv):
    out = io.StringIO()
    rc = app.main(argv, out=out)
    return rc, out.getvalue().splitlines()


def test_default_size_listing(tmp_path):
    _tree(tmp_path)
    rc, lines = _run([str(tmp_path)])

    assert rc == 0
    assert lines[0].endswith(str(tmp_path / ".dot" / "huge"))
    assert lines[1] == f"{'4.00 KB':>10} {tmp_path / 'big.bin'}"
    assert lines[2].endswith(str(tmp_path / "small.txt"))
    assert lines[-1] == f"3 files ({format_bytes(100000 + 4096 + 10)})"


def test_ignore_hidden_and_count(tmp_path):
    _tree(tmp_path)
    rc, lines = _run(["-f", "-n", "1", str(tmp_path)])

    assert rc == 0
    assert len(lines) == 2
    assert lines[0].endswith("big.bin")
    assert lines[1] == "2 files (4.01 KB)"


def test_name_reverse(tmp_path):
    _tree(tmp_path)
    rc, lines = _run(["-V", "name", "-r", "-f", str(tmp_path)])

    assert rc == 0
    assert lines[0] == f"{'small.txt':>20} {tmp_path / 'small.txt'}"
    assert lines[1] == f"{'big.bin':>20} {tmp_path / 'big.bin'}"


def test_date_listing(tmp_path):
    old = tmp_path / "old"
    new = tmp_path / "new"
    old.write_bytes(b"o")
    new.write_bytes(b"n")
    os.utime(old, (1_000_000_000, 1_000_000_000))
    os.utime(new, (1_700_000_000, 1_700_000_000))

    rc, lines = _run(["--value", "date", str(tmp_path)])

    assert rc == 0
    assert lines[0] == f"{format_timestamp(1_700_000_000)}  {new}"
    assert lines[1] == f"{format_timestamp(1_000_000_000)}  {old}"


def test_relative_roots_are_made_absolute(tmp_path, monkeypatch):
    (tmp_path / "x.txt").write_bytes(b"x")
    monkeypatch.chdir(tmp_path)
    rc, lines = _run([])
    assert rc == 0
    assert lines[0].endswith(os.sep + "x.txt")
    assert lines[-1] == "1 files (1 B)"


def test_unknown_value_is_a_config_error(tmp_path, capsys, monkeypatch):
    called = []
    monkeypatch.setattr(app.Traverser, "walk_all", lambda self, roots: called.append(roots))

    rc = app.main(["-V", "bytes", str(tmp_path)], out=io.StringIO())

    assert rc == 2
    assert called == []
    err = capsys.readouterr().err
    assert "unknown value" in err
    assert "usage:" in err


def test_negative_count_is_a_config_error(tmp_path, capsys):
    assert app.main(["-n", "-1", str(tmp_path)], out=io.StringIO()) == 2
    assert "count" in capsys.readouterr().err


def test_missing_root_does_not_fail_the_run(tmp_path):
    (tmp_path / "a").write_bytes(b"abc")
    rc, lines = _run([str(tmp_path / "missing"), str(tmp_path)])
    assert rc == 0
    assert lines == [f"{'3 B':>10} {tmp_path / 'a'}", "1 files (3 B)"]


def test_all_drives_adds_mountpoints(tmp_path, monkeypatch):
    (tmp_path / "f").write_bytes(b"12")
    monkeypatch.setattr(app, "drive_roots", lambda: [str(tmp_path)])
    rc, lines = _run(["-a"])
    assert rc == 0
    assert lines[-1] == "1 files (2 B)"


def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(app, "main", lambda: 2)
    with pytest.raises(SystemExit) as exc:
        app.run()
    assert exc.value.code == 2


def test_build_config_defaults():
    ns = app.build_parser().parse_args([])
    cfg = build_config(ns)
    assert cfg == ListerConfig(paths=["."])
    assert cfg.policy.value is ValueType.SIZE
    assert cfg.policy.reverse is False


def test_build_config_all_drives_has_no_default_path():
    cfg = build_config(app.build_parser().parse_args(["-a", "-vv"]))
    assert cfg.paths == []
    assert cfg.verbose == 2


def test_build_config_rejects_bad_value():
    with pytest.raises(ConfigError):
        build_config(app.build_parser().parse_args(["-V", "weird"]))


def test_format_entry_name_pads_to_20_columns():
    e = Entry("/x/abc", name="abc")
    assert app.format_entry(e, ValueType.NAME) == " " * 17 + "abc /x/abc"


@pytest.mark.parametrize("num,text", [
    (0, "0 B"),
    (1023, "1023 B"),
    (1024, "1.00 KB"),
    (1536, "1.50 KB"),
    (5 * 1024 ** 3, "5.00 GB"),
])
def test_format_bytes(num, text):
    assert format_bytes(num) == text


def test_format_count():
    assert format_count(1234567) == "1,234,567"
    assert format_count(0) == "0"


def test_format_timestamp_uses_local_time():
    ts = 1_600_000_000
    assert format_timestamp(ts) == time.strftime("%Y-%m-%d %H:%M:%S %Z", time.localtime(ts))
