import os

import pytest

from kedgify.core.document import Document
from kedgify.core.exceptions import ErrorKind, FileReadError, PathResolutionError
from kedgify.ingestion.splitter.engine import load_documents

pytestmark = pytest.mark.tier2


def test_documents_are_tagged_with_absolute_origin(tmp_path, monkeypatch):
    (tmp_path / "app.yml").write_bytes(b"---\na: 1\n---\nb: 2\n")
    monkeypatch.chdir(tmp_path)

    docs = load_documents(["app.yml"])

    origin = str(tmp_path / "app.yml")
    assert docs == [
        Document(origin_file=origin, content=b"a: 1\n"),
        Document(origin_file=origin, content=b"b: 2\n"),
    ]
    assert os.path.isabs(docs[0].origin_file)


def test_file_order_then_in_file_order(tmp_path):
    a = tmp_path / "a.yml"
    b = tmp_path / "b.yml"
    a.write_bytes(b"a: 1\n---\na: 2\n")
    b.write_bytes(b"b: 1\n---\nb: 2\n")

    docs = load_documents([str(b), str(a)])

    assert [d.content for d in docs] == [b"b: 1\n", b"b: 2\n", b"a: 1\n", b"a: 2\n"]
    assert [os.path.basename(d.origin_file) for d in docs] == ["b.yml", "b.yml", "a.yml", "a.yml"]


def test_separator_only_file_yields_no_documents(tmp_path):
    f = tmp_path / "empty.yml"
    f.write_bytes(b"---\n---\n")

    assert load_documents([str(f)]) == []


def test_file_without_separator_yields_one_document(tmp_path):
    f = tmp_path / "single.yaml"
    f.write_bytes(b"name: web\nreplicas: 2\n")

    docs = load_documents([str(f)])

    assert len(docs) == 1
    assert docs[0].text == "name: web\nreplicas: 2\n"


def test_unreadable_file_aborts_the_batch(tmp_path):
    good = tmp_path / "good.yml"
    good.write_bytes(b"a: 1\n")
    missing = tmp_path / "gone.yml"

    with pytest.raises(FileReadError) as exc_info:
        load_documents([str(good), str(missing)])

    err = exc_info.value
    assert err.kind is ErrorKind.FILE_READ
    assert err.path == str(missing)
    assert isinstance(err.__cause__, OSError)


def test_directory_passed_as_file_is_a_read_error(tmp_path):
    with pytest.raises(FileReadError):
        load_documents([str(tmp_path)])


def test_path_resolution_failure(tmp_path, monkeypatch):
    f = tmp_path / "a.yml"
    f.write_bytes(b"a: 1\n")

    def broken_abspath(path):
        raise OSError("cwd vanished")

    monkeypatch.setattr("kedgify.ingestion.splitter.engine.os.path.abspath", broken_abspath)

    with pytest.raises(PathResolutionError, match="cannot determine the absolute file path") as exc_info:
        load_documents([str(f)])

    assert exc_info.value.kind is ErrorKind.PATH_RESOLUTION
