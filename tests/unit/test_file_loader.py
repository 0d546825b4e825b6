from pathlib import Path

import pytest

from docintel.processor.exceptions import UnsupportedMediaTypeError
from docintel.processor.file_loader import FileLoader


class TestLoad:
    def test_reads_pdf(self, tmp_path: Path) -> None:
        path = tmp_path / "deed.pdf"
        path.write_bytes(b"%PDF test content")

        doc = FileLoader().load(path)

        assert doc.content == b"%PDF test content"
        assert doc.media_type == "application/pdf"
        assert doc.file_name == "deed.pdf"
        assert doc.document_id == "deed.pdf"

    def test_guesses_image_media_type(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.png"
        path.write_bytes(b"png")
        assert FileLoader().load(path).media_type == "image/png"

    def test_uses_given_document_id(self, tmp_path: Path) -> None:
        path = tmp_path / "plan.jpg"
        path.write_bytes(b"jpg")
        assert FileLoader().load(path, document_id="42").document_id == "42"

    def test_rejects_unsupported_type(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        with pytest.raises(UnsupportedMediaTypeError, match="notes.txt"):
            FileLoader().load(path)

    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileLoader().load(tmp_path / "missing.pdf")


class TestLoadAll:
    def test_ids_follow_position(self, tmp_path: Path) -> None:
        first = tmp_path / "a.pdf"
        second = tmp_path / "a.png"
        first.write_bytes(b"%PDF")
        second.write_bytes(b"png")

        docs = FileLoader().load_all([first, second])

        assert [d.document_id for d in docs] == ["1:a.pdf", "2:a.png"]
