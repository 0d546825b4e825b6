from abc import ABC, abstractmethod

from docintel.ocr.models import RecognizedText


class BaseOcrEngine(ABC):
    """Contract for all text recognition adapters."""

    name: str = "base"

    @abstractmethod
    def recognize(self, content: bytes) -> RecognizedText:
        """Read text from a raw document payload.

        Args:
            content: Raw image or PDF bytes.

        Returns:
            RecognizedText with the full text (empty if nothing was found)
            and the engine's rough confidence in it.

        Raises:
            OcrError: if the engine or the remote service fails.
        """
