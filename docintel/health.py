from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ConnectionCheck:
    """Outcome of a connectivity probe against an external service."""

    service: str
    success: bool
    message: str
    error: str | None = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
