import time

import pytest

from amendedit import loader
from amendedit.loader import FileLoader, LoadProgress, load_text


def _wait_result(file_loader, timeout=5.0):
    deadline = time.monotonic() + timeout
    while True:
        done = file_loader.result()
        if done is not None:
            return done
        if time.monotonic() > deadline:
            raise AssertionError("loader did not finish")
        time.sleep(0.001)


def test_percent_and_describe_with_total():
    progress = LoadProgress(bytes_loaded=512, total_bytes=2048)
    assert progress.describe() == "(512 / 2048 bytes, 25%)"


def test_describe_without_total():
    progress = LoadProgress(bytes_loaded=300, total_bytes=0)
    assert progress.percent() is None
    assert progress.describe() == "(300 bytes loaded)"


def test_load_text_round_trip(tmp_path):
    content = "line of text\n" * 500
    path = tmp_path / "notes.txt"
    path.write_text(content, encoding="utf-8")
    assert load_text(path, None, 0) == content


def test_progress_reports(tmp_path):
    content = "x" * 5000
    path = tmp_path / "big.txt"
    path.write_text(content, encoding="utf-8")
    reports = []
    result = load_text(path, reports.append, 0)
    assert result == content
    assert reports
    assert all(r.total_bytes == 5000 for r in reports)
    loaded = [r.bytes_loaded for r in reports]
    assert loaded == sorted(loaded)
    assert max(loaded) <= 5000
    partials = [r.partial for r in reports]
    assert all(content.startswith(p) for p in partials)
    assert max(len(p) for p in partials) == loader.PARTIAL_LIMIT


def test_missing_file_gives_empty_text(tmp_path):
    reports = []
    assert load_text(tmp_path / "absent.txt", reports.append, 0) == ""
    assert reports[0].total_bytes == 0


def test_invalid_utf8_chunk_is_skipped(tmp_path):
    path = tmp_path / "mixed.bin"
    path.write_bytes(b"\xff" * 512 + b"tail")
    assert load_text(path, None, 0) == "tail"


def test_large_file_is_truncated(tmp_path, monkeypatch):
    monkeypatch.setattr(loader, "LARGE_FILE_THRESHOLD", 1000)
    monkeypatch.setattr(loader, "MAX_PREVIEW_BYTES", 1024)
    path = tmp_path / "huge.txt"
    path.write_text("a" * 2000, encoding="utf-8")
    reports = []
    result = load_text(path, reports.append, 0)
    assert result == "a" * 1024 + loader.TRUNCATION_NOTICE
    assert reports[-1].bytes_loaded == 1024


def test_file_loader_result(tmp_path):
    content = "hello\nworld\n"
    path = tmp_path / "doc.txt"
    path.write_text(content, encoding="utf-8")
    file_loader = FileLoader(path, pause=0)
    assert file_loader.result() is None
    file_loader.start()
    assert _wait_result(file_loader) == (str(path), content)
    assert file_loader.snapshot().total_bytes == len(content)


def test_file_loader_cannot_start_twice(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_text("abc", encoding="utf-8")
    file_loader = FileLoader(path, pause=0)
    file_loader.start()
    with pytest.raises(RuntimeError):
        file_loader.start()
    assert _wait_result(file_loader)[1] == "abc"