"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    # Surrogate key that preserves insertion order for listings
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String, nullable=False),
    Column("title", Text, nullable=False),
    Column("author", Text, nullable=False, server_default=""),
    Column("url", Text, nullable=False),
    Column("likes", Integer, nullable=False, server_default="0"),
    UniqueConstraint("id", name="uq_blogs_id"),
)

Index("idx_blogs_author", blogs_table.c.author)


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),
    Column("id", String, nullable=False),
    Column("username", String(255), nullable=False),
    Column("name", String(255), nullable=True),
    Column("password_hash", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("id", name="uq_users_id"),
    UniqueConstraint("username", name="uq_users_username"),
)
