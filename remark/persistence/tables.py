"""SQLAlchemy table definitions for Remark.

These table definitions are used for SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (self-referencing for replies)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("gen_random_uuid()")),
    Column("author_id", UUID, nullable=False),  # Issued by the auth provider
    Column("content", Text, nullable=False),
    # No cascade: soft-deleting a parent never touches its replies
    Column("parent_id", UUID, ForeignKey("comments.id"), nullable=True),
    Column("liked_by", ARRAY(UUID), nullable=False, server_default=text("'{}'")),
    Column("disliked_by", ARRAY(UUID), nullable=False, server_default=text("'{}'")),
    Column("is_deleted", Boolean, nullable=False, server_default=text("false")),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("now()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("now()")
    ),
    CheckConstraint(
        "char_length(content) BETWEEN 1 AND 2000", name="content_length_bounds"
    ),
)

# Child listing is always "replies of X, newest first"
Index(
    "idx_comments_parent_id_created_at",
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_author_id", comments_table.c.author_id)
