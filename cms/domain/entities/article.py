"""Article aggregate: an immutable, self-validating record plus its identity."""

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any

from cms.domain.exceptions import DomainValidationError, InvalidArticleIdError

TITLE_MAX_LENGTH = 255
SLUG_MAX_LENGTH = 191

_SLUG_PATTERN = re.compile(r"[a-z0-9-]+")


@dataclass(frozen=True)
class ArticleId:
    """Strictly positive article identity, compared by value."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise InvalidArticleIdError(self.value)

    @classmethod
    def from_int(cls, value: int) -> "ArticleId":
        return cls(value)

    def equals(self, other: "ArticleId") -> bool:
        return self.value == other.value

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True, kw_only=True)
class Article:
    """Core domain entity for a CMS article.

    Instances are validated in ``__post_init__``, so every construction path
    (``create``, ``reconstruct``, ``update``) runs the same rules. ``id`` and
    the timestamps belong to the persistence layer and are only carried
    through by domain operations.
    """

    id: ArticleId | None = None
    user_id: int = 0
    title: str = ""
    slug: str = ""
    body: str = ""
    published: bool = False
    tag_ids: tuple[int, ...] = field(default_factory=tuple)
    created: datetime | None = None
    modified: datetime | None = None

    def __post_init__(self) -> None:
        _validate_title(self.title)
        _validate_slug(self.slug)
        _validate_body(self.body)

    @classmethod
    def create(cls, data: Mapping[str, Any]) -> "Article":
        """Build a new, not yet persisted article from raw input."""
        return cls(
            user_id=int(data.get("user_id") or 0),
            title=str(data.get("title") or ""),
            slug=str(data.get("slug") or ""),
            body=str(data.get("body") or ""),
            published=bool(data.get("published") or False),
            tag_ids=_coerce_tag_ids(data.get("tag_ids")),
        )

    @classmethod
    def reconstruct(cls, data: Mapping[str, Any]) -> "Article":
        """Rebuild an article from stored data (identity and timestamps included)."""
        raw_id = data.get("id")
        return cls(
            id=ArticleId.from_int(int(raw_id)) if raw_id is not None else None,
            user_id=int(data.get("user_id") or 0),
            title=str(data.get("title") or ""),
            slug=str(data.get("slug") or ""),
            body=str(data.get("body") or ""),
            published=bool(data.get("published") or False),
            tag_ids=_coerce_tag_ids(data.get("tag_ids")),
            created=_parse_datetime(data.get("created")),
            modified=_parse_datetime(data.get("modified")),
        )

    def update(self, data: Mapping[str, Any]) -> "Article":
        """Return a revalidated copy with the supplied fields overridden.

        Keys that are missing or ``None`` keep the current value. ``id``,
        ``created`` and ``modified`` are never changed here.
        """
        changes: dict[str, Any] = {}
        if data.get("user_id") is not None:
            changes["user_id"] = int(data["user_id"])
        for name in ("title", "slug", "body"):
            if data.get(name) is not None:
                changes[name] = str(data[name])
        if data.get("published") is not None:
            changes["published"] = bool(data["published"])
        if isinstance(data.get("tag_ids"), (list, tuple)):
            changes["tag_ids"] = _coerce_tag_ids(data["tag_ids"])
        return replace(self, **changes)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


def _coerce_tag_ids(raw: Any) -> tuple[int, ...]:
    if not isinstance(raw, (list, tuple)):
        return ()
    return tuple(int(tag_id) for tag_id in raw)


def _parse_datetime(raw: Any) -> datetime | None:
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    return datetime.fromisoformat(str(raw))


def _validate_title(title: str) -> None:
    if not title.strip():
        raise DomainValidationError("Title cannot be empty", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise DomainValidationError(
            f"Title cannot exceed {TITLE_MAX_LENGTH} characters", field="title"
        )


def _validate_slug(slug: str) -> None:
    if not slug.strip():
        raise DomainValidationError("Slug cannot be empty", field="slug")
    if len(slug) > SLUG_MAX_LENGTH:
        raise DomainValidationError(
            f"Slug cannot exceed {SLUG_MAX_LENGTH} characters", field="slug"
        )
    if not _SLUG_PATTERN.fullmatch(slug):
        raise DomainValidationError(
            "Slug can only contain lowercase letters, numbers, and hyphens",
            field="slug",
        )


def _validate_body(body: str) -> None:
    if not body.strip():
        raise DomainValidationError("Body cannot be empty", field="body")
