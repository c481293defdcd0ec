"""Unit tests for observers.py."""

import gzip
import io

import jsonlines
import pytest

from number_pipeline.observers import (
    CountObserver,
    JsonlinesObserver,
    PrintObserver,
)


def test_print_observer_stream():
    stream = io.StringIO()
    observer = PrintObserver(stream)
    for number in [4, -6, 8]:
        observer.on_number(number)
    observer.on_finished()
    assert stream.getvalue() == "4\n-6\n8\n"


def test_print_observer_defaults_to_stdout(capsys):
    observer = PrintObserver()
    observer.on_number(42)
    observer.on_finished()
    assert capsys.readouterr().out == "42\n"


def test_count_observer():
    """
    CountObserver counts kept numbers and reports once at the end.

    This test verifies that:
    1. The counter starts at zero
    2. Each on_number call increments it
    3. Nothing is written before on_finished
    4. on_finished writes the summary line
    """
    stream = io.StringIO()
    observer = CountObserver(stream)
    assert observer.count == 0

    for number in [1, 2, 3]:
        observer.on_number(number)
    assert observer.count == 3
    assert stream.getvalue() == ""

    observer.on_finished()
    assert stream.getvalue() == "Total numbers passed filter: 3\n"


def test_count_observer_nothing_kept(capsys):
    CountObserver().on_finished()
    assert capsys.readouterr().out == "Total numbers passed filter: 0\n"


def test_jsonlines_observer_dry_run(tmp_path):
    path = tmp_path / "kept.jsonl"
    observer = JsonlinesObserver(str(path), dry_run=True)
    assert not path.exists()

    observer.on_started()
    observer.on_number(4)
    observer.on_number(6)
    observer.on_finished()

    with jsonlines.open(path) as reader:
        assert list(reader) == [4, 6]


def test_jsonlines_observer_compressed(tmp_path):
    path = tmp_path / "kept.jsonl.gz"
    observer = JsonlinesObserver(str(path))
    observer.on_started()
    observer.on_number(-1)
    observer.on_finished()

    with gzip.open(path, "rt") as f:
        assert list(jsonlines.Reader(f)) == [-1]


def test_jsonlines_observer_empty_run(tmp_path):
    """An observer that sees no numbers still leaves an empty output file."""
    path = tmp_path / "kept.jsonl"
    observer = JsonlinesObserver(str(path), dry_run=True)
    observer.on_started()
    observer.on_finished()
    assert path.read_text() == ""


def test_jsonlines_observer_close_releases_file(tmp_path):
    """
    Closing without on_finished still closes the output file.

    This test verifies that:
    1. The output file is opened by on_started
    2. close() releases it when the run is cut short
    3. Numbers written before the close are kept
    4. close() can be called again safely
    """
    path = tmp_path / "kept.jsonl"
    observer = JsonlinesObserver(str(path), dry_run=True)
    observer.on_started()
    output_writer = observer._output_writer
    file_object = output_writer.file_object
    observer.on_number(7)

    observer.close()
    assert file_object.closed
    assert output_writer.file_object is None
    observer.close()

    with jsonlines.open(path) as reader:
        assert list(reader) == [7]


def test_jsonlines_observer_missing_directory(tmp_path):
    observer = JsonlinesObserver(str(tmp_path / "missing" / "kept.jsonl.gz"))
    with pytest.raises(FileNotFoundError):
        observer.on_started()
    observer.close()


def test_default_hooks_do_nothing():
    stream = io.StringIO()
    observer = CountObserver(stream)
    observer.on_started()
    observer.close()
    assert stream.getvalue() == ""
