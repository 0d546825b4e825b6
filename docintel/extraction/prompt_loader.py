from pathlib import Path

from docintel.extraction.exceptions import TemplateError
from docintel.ocr.models import DocumentType

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"
_REQUIRED_PLACEHOLDER = "{document_text}"


def load_prompt_template(document_type: DocumentType, path: Path | None = None) -> str:
    """Load the instruction template for a document type.

    Args:
        document_type: Selects the bundled ``prompts/<type>.txt`` file.
        path: Optional override file.

    Returns:
        The raw template string with ``{document_text}`` and
        ``{not_specified}`` placeholders.

    Raises:
        TemplateError: if the file cannot be read, is empty, or lacks the
            document text placeholder.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"{document_type.value}.txt"
    try:
        template = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateError(f"Failed to load prompt template: {exc}") from exc
    if not template.strip():
        raise TemplateError(f"Prompt template is empty: {path}")
    if _REQUIRED_PLACEHOLDER not in template:
        raise TemplateError(f"Prompt template {path} lacks {_REQUIRED_PLACEHOLDER}")
    return template


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system prompt shared by every document type.

    Raises:
        TemplateError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise TemplateError(f"Failed to load system prompt: {exc}") from exc
