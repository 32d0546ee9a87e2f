"""Create documents table

Revision ID: 001
Revises: None
Create Date: 2026-10-17 00:00:00.000000+00:00

What:  Creates the `documents` table backing SQLKeyValueStore.
How:   Portable column types only, so the same migration runs on PostgreSQL
       and SQLite.

Rollback: downgrade() drops the table entirely (destructive — all pastes lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the documents table. See haste/models/document.py for column docs."""
    op.create_table(
        "documents",
        sa.Column(
            "key",
            sa.String(64),
            nullable=False,
            comment="Generated lowercase document key",
        ),
        sa.Column(
            "data",
            sa.Text(),
            nullable=False,
            comment="Raw document text",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this document was first written (UTC)",
        ),
        sa.PrimaryKeyConstraint("key"),
    )


def downgrade() -> None:
    """Drop the documents table. WARNING: all stored documents are lost."""
    op.drop_table("documents")
