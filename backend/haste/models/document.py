"""
Haste Store — Document SQLAlchemy Model
=========================================

What:  ORM model for the `documents` table used by the database backend.
Why:   The key-value contract maps onto one row per key: key → text.
How:   Inherits from the shared DeclarativeBase; Alembic reads this for migrations.

Table Design:
    - key: the generated lowercase identifier; primary key, so a lookup is a
      single index seek. Rows are overwritten (merge) on key reuse, never
      rejected — collisions are not detected by design of the key space.
    - data: the paste itself; TEXT because pastes have no length limit.
    - created_at: informational only; nothing expires documents.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from haste.database import Base


class DocumentRecord(Base):
    """One stored paste, addressed by its generated key."""

    __tablename__ = "documents"

    key: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Generated lowercase document key",
    )

    data: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Raw document text",
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this document was first written (UTC)",
    )

    def __repr__(self) -> str:
        return f"<DocumentRecord(key='{self.key}', size={len(self.data or '')})>"
