"""Tag entity, a label that can be attached to many articles."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Tag:
    """Core domain entity representing an article tag."""

    title: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, title: str | None = None) -> None:
        """Rename the tag and refresh the updated_at timestamp."""
        if title is not None:
            self.title = title
        self.updated_at = datetime.now(timezone.utc)
