"""User entity: the author an article belongs to."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """Core domain entity for an article author."""

    email: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, email: str | None = None) -> None:
        if email is not None:
            self.email = email
        self.updated_at = datetime.now(timezone.utc)
