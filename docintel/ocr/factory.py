from collections.abc import Callable

from docintel.config.settings import Settings
from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.google_vision_adapter import GoogleVisionAdapter
from docintel.ocr.pdfplumber_adapter import PdfPlumberAdapter
from docintel.ocr.pymupdf_adapter import PyMuPdfAdapter
from docintel.ocr.tesseract_adapter import TesseractAdapter
from docintel.ocr.text_extractor import TextExtractor


class OcrEngineFactory:
    """Creates the configured image and PDF engines and wraps them in a TextExtractor."""

    IMAGE_ENGINES: dict[str, Callable[[Settings], BaseOcrEngine]] = {
        "google_vision": lambda s: GoogleVisionAdapter(
            service_account_path=s.google_service_account_path,
            project_id=s.google_cloud_project_id,
        ),
        "tesseract": lambda s: TesseractAdapter(languages=s.tesseract_languages),
    }

    PDF_ENGINES: dict[str, type[BaseOcrEngine]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        return TextExtractor(
            image_engine=cls.create_image_engine(settings),
            pdf_engine=cls.create_pdf_engine(settings),
        )

    @classmethod
    def create_image_engine(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_image_engine.lower()
        builder = cls.IMAGE_ENGINES.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown OCR image engine '{engine}'. Choose from: {list(cls.IMAGE_ENGINES)}"
            )
        return builder(settings)

    @classmethod
    def create_pdf_engine(cls, settings: Settings) -> BaseOcrEngine:
        engine = settings.ocr_pdf_engine.lower()
        adapter_cls = cls.PDF_ENGINES.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ENGINES)}"
            )
        return adapter_cls()
