"""SQLAlchemy table definitions for devconnect.

Profiles and posts are stored as documents: their embedded lists (skills,
social links, experience, education, likes, comments) live in JSONB columns
and are written back whole on every save. The definitions match the schema
created by the Alembic migrations.
"""

from sqlalchemy import (
    Column,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("avatar", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# PROFILES TABLE (one per user)
# ============================================================================
# No foreign keys to users: the account delete removes posts, profile and user
# itself, in that order.
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column("company", String(255), nullable=True),
    Column("location", String(255), nullable=True),
    Column("website", Text, nullable=False, server_default=""),
    Column("bio", Text, nullable=True),
    Column("skills", JSONB, nullable=False, server_default="[]"),
    Column("status", String(255), nullable=False),
    Column("githubusername", String(255), nullable=True),
    Column("social", JSONB, nullable=False, server_default="{}"),
    Column("experience", JSONB, nullable=False, server_default="[]"),
    Column("education", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", name="uq_profiles_user_id"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", UUID(as_uuid=True), nullable=False),
    Column("text", Text, nullable=False),
    Column("name", String(255), nullable=True),  # Author name snapshot
    Column("avatar", Text, nullable=True),  # Author avatar snapshot
    Column("likes", JSONB, nullable=False, server_default="[]"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
