class ExtractionError(Exception):
    """Base exception for structured field extraction."""


class ServiceUnavailableError(ExtractionError):
    """Raised when the LLM provider cannot be reached or refuses the call (network, quota, auth)."""


class MalformedResponseError(ExtractionError):
    """Raised when the LLM response cannot be parsed as a flat JSON object."""


class TemplateError(ExtractionError):
    """Raised when a field or prompt template is unusable. Indicates a packaging defect."""


class RequestRejectedError(ExtractionError):
    """Raised when the LLM provider rejects the request itself (bad parameters, context length, content filter)."""
