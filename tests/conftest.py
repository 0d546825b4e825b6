import io

import pymupdf
import pytest
from PIL import Image


def _pdf_with_pages(*texts: str) -> bytes:
    doc = pymupdf.open()
    for text in texts:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    return _pdf_with_pages("Hello PDF World")


@pytest.fixture
def multi_page_pdf_bytes() -> bytes:
    return _pdf_with_pages("Page one content", "Page two content")


@pytest.fixture
def empty_pdf_bytes() -> bytes:
    return _pdf_with_pages("")


@pytest.fixture
def white_png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), "white").save(buffer, format="PNG")
    return buffer.getvalue()
