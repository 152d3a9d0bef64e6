from pathlib import Path

import pytest

from filereader.interface import tools as t
from filereader.models import FileReference


class FakeSurface:
    def __init__(self):
        self.chunks = ["stale"]
        self.cleared = 0

    def clear(self):
        self.chunks = []
        self.cleared += 1

    def append_text(self, text):
        self.chunks.append(text)

    @property
    def text(self):
        return "".join(self.chunks)


def test_docs_folder_path_uses_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert t.docs_folder_path() == Path.cwd() / "docs"


def test_docs_folder_path_follows_config(tmp_path, restore_config):
    t.modify_config("docs_folder", "manuals")
    assert t.docs_folder_path(tmp_path) == tmp_path / "manuals"


def test_missing_folder_message(tmp_path):
    folder = tmp_path / "docs"
    assert t.missing_folder_message(folder) == f"ERROR: directory {folder} does not exist."


def test_load_files_missing_folder_returns_none(tmp_path):
    assert t.load_files(tmp_path / "docs") is None


def test_load_files_skips_subdirectories(docs_dir):
    files = t.load_files(docs_dir)
    expected = [p.name for p in docs_dir.iterdir() if p.is_file()]
    assert [f.name for f in files] == expected
    assert sorted(expected) == ["a.txt", "b.txt"]
    assert all(f.path.is_absolute() for f in files)


def test_load_files_empty_folder(tmp_path):
    (tmp_path / "docs").mkdir()
    assert t.load_files(tmp_path / "docs") == []


def test_read_lines_strips_every_separator(tmp_path):
    p = tmp_path / "mixed.txt"
    p.write_bytes(b"one\r\ntwo\rthree\nfour")
    assert list(t.read_lines(FileReference.from_path(p))) == ["one", "two", "three", "four"]


def test_read_lines_keeps_blank_lines(tmp_path):
    p = tmp_path / "blank.txt"
    p.write_text("a\n\nb\n")
    assert list(t.read_lines(p)) == ["a", "", "b"]


def test_display_joins_lines_without_separators(docs_dir):
    surface = FakeSurface()
    t.display_file_contents(FileReference.from_path(docs_dir / "a.txt"), surface)
    assert surface.cleared == 1
    assert surface.text == "line1line2"


def test_display_missing_file_propagates(tmp_path):
    p = tmp_path / "gone.txt"
    p.write_text("x")
    ref = FileReference.from_path(p)
    p.unlink()
    surface = FakeSurface()
    with pytest.raises(FileNotFoundError):
        t.display_file_contents(ref, surface)
    # cleared before the open failed
    assert surface.chunks == []


def test_load_files_docs_is_a_regular_file(tmp_path):
    (tmp_path / "docs").write_text("x")
    assert t.load_files(tmp_path / "docs") is None


class ExplodingSurface(FakeSurface):
    def append_text(self, text):
        raise RuntimeError("surface gone")


@pytest.fixture
def opened_handles(monkeypatch):
    handles = []

    def spy_open(*args, **kwargs):
        fh = open(*args, **kwargs)
        handles.append(fh)
        return fh

    monkeypatch.setattr(t, "open", spy_open, raising=False)
    return handles


def test_handle_closed_after_full_read(docs_dir, opened_handles):
    t.display_file_contents(FileReference.from_path(docs_dir / "a.txt"), FakeSurface())
    assert len(opened_handles) == 1
    assert opened_handles[0].closed


def test_handle_closed_when_surface_raises(docs_dir, opened_handles):
    with pytest.raises(RuntimeError):
        t.display_file_contents(FileReference.from_path(docs_dir / "a.txt"), ExplodingSurface())
    assert len(opened_handles) == 1
    assert opened_handles[0].closed
