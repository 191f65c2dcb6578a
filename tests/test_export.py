"""Command line entry point and file output."""

import logging

import pytest

import export
from export import DestinationUnwritableError, main, write_document
from logic import render_document


class TestWriteDocument:
    def test_writes_text(self, tmp_path):
        target = write_document(tmp_path / "out.tex", "\\foo{bar}")
        assert target.read_text(encoding="utf-8") == "\\foo{bar}"

    def test_missing_directory(self, tmp_path):
        with pytest.raises(DestinationUnwritableError) as excinfo:
            write_document(tmp_path / "missing" / "out.tex", "x")
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_directory_as_target(self, tmp_path):
        with pytest.raises(DestinationUnwritableError):
            write_document(tmp_path, "x")

    def test_failed_write_leaves_no_file(self, tmp_path, monkeypatch):
        def fail_replace(src, dst):
            raise OSError(28, "No space left on device")

        monkeypatch.setattr(export.os, "replace", fail_replace)
        with pytest.raises(DestinationUnwritableError):
            write_document(tmp_path / "out.tex", "\\foo{bar}")
        assert list(tmp_path.iterdir()) == []

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "out.tex"
        target.write_text("old", encoding="utf-8")
        write_document(target, "new")
        assert target.read_text(encoding="utf-8") == "new"
        assert list(tmp_path.iterdir()) == [target]


class TestMain:
    def test_writes_default_document(self, tmp_path):
        target = tmp_path / "text.tex"
        assert main(["--output", str(target)]) == 0
        assert target.read_text(encoding="utf-8") == render_document()

    def test_unwritable_destination(self, tmp_path, caplog):
        target = tmp_path / "missing" / "text.tex"
        with caplog.at_level(logging.ERROR):
            assert main(["-o", str(target)]) == 1
        assert not target.exists()
        assert "bad file path" in caplog.text
