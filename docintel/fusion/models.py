from dataclasses import dataclass, field


@dataclass(frozen=True)
class FusedRecord:
    """Consolidated answer for a batch with per-field provenance.

    ``provenance`` maps a field name to the document id that supplied its
    final value; fields still holding the sentinel have no entry.
    """

    fields: dict[str, str] = field(default_factory=dict)
    provenance: dict[str, str] = field(default_factory=dict)
    primary_source: str | None = None
    average_confidence: int = 0
    source_documents: int = 0
