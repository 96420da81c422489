"""Reusable ORM mixins."""

from datetime import datetime, timezone

from sqlalchemy import ColumnElement, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """Track creation/update times in UTC."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SoftDeleteMixin:
    """Rows are never hard-deleted; deletion only stamps ``deleted_at``."""

    deleted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True, default=None)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        self.deleted_at = datetime.now(tz=timezone.utc)

    def restore(self) -> None:
        self.deleted_at = None


def not_deleted(model: type[SoftDeleteMixin]) -> ColumnElement[bool]:
    """The read-path filter every query applies unless deleted rows are requested."""
    return model.deleted_at.is_(None)
