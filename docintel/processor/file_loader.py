import mimetypes
from pathlib import Path

from docintel.processor.exceptions import UnsupportedMediaTypeError
from docintel.processor.models import RawDocument

PDF_MEDIA_TYPE = "application/pdf"


class FileLoader:
    """Reads local files into RawDocuments, guessing the media type from the extension."""

    def load(self, path: Path, document_id: str | None = None) -> RawDocument:
        """Read a document from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedMediaTypeError: if the file is neither an image nor a PDF.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        media_type = self._media_type(path)
        return RawDocument(
            document_id=document_id or path.name,
            file_name=path.name,
            content=path.read_bytes(),
            media_type=media_type,
        )

    def load_all(self, paths: list[Path]) -> list[RawDocument]:
        """Load several files; ids are the 1-based position plus the file name."""
        return [
            self.load(path, document_id=f"{index}:{path.name}")
            for index, path in enumerate(paths, start=1)
        ]

    @staticmethod
    def _media_type(path: Path) -> str:
        media_type, _ = mimetypes.guess_type(path.name)
        if media_type is not None and (
            media_type == PDF_MEDIA_TYPE or media_type.startswith("image/")
        ):
            return media_type
        raise UnsupportedMediaTypeError(
            f"'{path.name}' has unsupported media type {media_type!r}; expected an image or PDF"
        )
