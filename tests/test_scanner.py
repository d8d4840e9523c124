import os
from pathlib import Path

import pytest

from playerdir.directory import DirectoryUnavailable, NameTooLong, resolve_path, scan_player_files


def test_resolve_path_inserts_separator_only_when_missing():
    with_sep = resolve_path(f"{os.sep}a{os.sep}b{os.sep}", "p1")
    without_sep = resolve_path(f"{os.sep}a{os.sep}b", "p1")

    assert with_sep == without_sep == f"{os.sep}a{os.sep}b{os.sep}p1"


def test_resolve_path_empty_directory_is_not_corrected():
    assert resolve_path("", "p1") == f"{os.sep}p1"


def test_resolve_path_rejects_long_name():
    assert resolve_path("players", "x" * 7, max_name_len=8, max_file_path_len=32)
    with pytest.raises(NameTooLong):
        resolve_path("players", "x" * 8, max_name_len=8, max_file_path_len=32)


def test_resolve_path_measures_encoded_bytes():
    # four two-byte characters need eight bytes plus the terminator
    with pytest.raises(NameTooLong):
        resolve_path("players", "éééé", max_name_len=8, max_file_path_len=32)


def test_resolve_path_rejects_long_directory():
    assert resolve_path("d" * 23, "p1", max_name_len=8, max_file_path_len=32)
    with pytest.raises(NameTooLong):
        resolve_path("d" * 24, "p1", max_name_len=8, max_file_path_len=32)


def test_resolved_path_fits_path_width():
    path = resolve_path("d" * 23, "n" * 7, max_name_len=8, max_file_path_len=32)
    assert len(path) == 31


def test_scan_yields_only_regular_files(tmp_path: Path):
    (tmp_path / "alice").write_text("", encoding="utf-8")
    (tmp_path / "bob").write_text("", encoding="utf-8")
    (tmp_path / "archive").mkdir()
    (tmp_path / "archive" / "old").write_text("", encoding="utf-8")

    assert sorted(scan_player_files(str(tmp_path))) == ["alice", "bob"]


def test_scan_is_single_pass(tmp_path: Path):
    (tmp_path / "alice").write_text("", encoding="utf-8")

    scan = scan_player_files(str(tmp_path))
    assert list(scan) == ["alice"]
    assert list(scan) == []


def test_scan_missing_directory_raises(tmp_path: Path):
    with pytest.raises(DirectoryUnavailable) as excinfo:
        list(scan_player_files(str(tmp_path / "missing")))
    assert excinfo.value.path == str(tmp_path / "missing")


def test_scan_file_instead_of_directory_raises(tmp_path: Path):
    not_a_dir = tmp_path / "players"
    not_a_dir.write_text("", encoding="utf-8")

    with pytest.raises(DirectoryUnavailable):
        list(scan_player_files(str(not_a_dir)))
