import io

import pytesseract
from PIL import Image

from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.exceptions import OcrError
from docintel.ocr.models import RecognizedText


class TesseractAdapter(BaseOcrEngine):
    """Local OCR through the tesseract binary.

    Words are regrouped into lines by tesseract's block/paragraph/line
    numbering; confidence is the mean word confidence scaled to 0..1.
    """

    name = "tesseract"

    def __init__(self, languages: str = "eng") -> None:
        self._languages = languages

    def recognize(self, content: bytes) -> RecognizedText:
        try:
            with Image.open(io.BytesIO(content)) as image:
                data = pytesseract.image_to_data(
                    image,
                    lang=self._languages,
                    output_type=pytesseract.Output.DICT,
                )
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc

        lines: dict[tuple[int, int, int], list[str]] = {}
        confidences: list[float] = []
        for i, word in enumerate(data["text"]):
            word = word.strip()
            if not word:
                continue
            key = (data["block_num"][i], data["par_num"][i], data["line_num"][i])
            lines.setdefault(key, []).append(word)
            conf = float(data["conf"][i])
            if conf >= 0:
                confidences.append(conf)

        text = "\n".join(" ".join(words) for words in lines.values())
        confidence = sum(confidences) / len(confidences) / 100 if confidences else 0.0
        return RecognizedText(text=text, confidence=round(confidence, 2))
