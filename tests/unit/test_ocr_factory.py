import pytest

from docintel.config.settings import Settings
from docintel.ocr.factory import OcrEngineFactory
from docintel.ocr.google_vision_adapter import GoogleVisionAdapter
from docintel.ocr.pdfplumber_adapter import PdfPlumberAdapter
from docintel.ocr.pymupdf_adapter import PyMuPdfAdapter
from docintel.ocr.tesseract_adapter import TesseractAdapter
from docintel.ocr.text_extractor import TextExtractor


def _make_settings(image_engine: str = "google_vision", pdf_engine: str = "pdfplumber") -> Settings:
    return Settings(
        ocr_image_engine=image_engine,
        ocr_pdf_engine=pdf_engine,
        google_service_account_path="",
        google_cloud_project_id="",
        tesseract_languages="eng",
    )


class TestImageEngines:
    def test_creates_google_vision_adapter(self) -> None:
        engine = OcrEngineFactory.create_image_engine(_make_settings("google_vision"))
        assert isinstance(engine, GoogleVisionAdapter)

    def test_creates_tesseract_adapter(self) -> None:
        engine = OcrEngineFactory.create_image_engine(_make_settings("Tesseract"))
        assert isinstance(engine, TesseractAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown OCR image engine"):
            OcrEngineFactory.create_image_engine(_make_settings("easyocr"))


class TestPdfEngines:
    def test_creates_pdfplumber_adapter(self) -> None:
        engine = OcrEngineFactory.create_pdf_engine(_make_settings(pdf_engine="pdfplumber"))
        assert isinstance(engine, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        engine = OcrEngineFactory.create_pdf_engine(_make_settings(pdf_engine="PyMuPDF"))
        assert isinstance(engine, PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            OcrEngineFactory.create_pdf_engine(_make_settings(pdf_engine="unknown"))


class TestCreate:
    def test_builds_text_extractor(self) -> None:
        extractor = OcrEngineFactory.create(_make_settings())
        assert isinstance(extractor, TextExtractor)
