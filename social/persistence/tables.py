"""SQLAlchemy table definitions for the social API.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    LargeBinary,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, CITEXT, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ROLES TABLE (reference data seeded by migration)
# ============================================================================
roles_table = Table(
    "roles",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("level", Integer, nullable=False, server_default="0"),
    Column("description", Text, nullable=False, server_default=""),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("username", String(100), nullable=False, unique=True),
    Column("email", CITEXT, nullable=False, unique=True),
    Column("password", LargeBinary, nullable=False),
    Column("is_active", Boolean, nullable=False, server_default="false"),
    Column("role_id", BigInteger, ForeignKey("roles.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# USER INVITATIONS TABLE (hashed activation tokens)
# ============================================================================
user_invitations_table = Table(
    "user_invitations",
    metadata,
    Column("token", String(64), primary_key=True),  # sha256 hex digest
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("expiry", TIMESTAMP(timezone=True), nullable=False),
)

Index("idx_user_invitations_user_id", user_invitations_table.c.user_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", String(100), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("tags", ARRAY(String(100)), nullable=False, server_default="{}"),
    Column("version", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("version >= 1", name="version_positive"),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_id", comments_table.c.post_id)

# ============================================================================
# FOLLOWERS TABLE (user_id is followed by follower_id)
# ============================================================================
followers_table = Table(
    "followers",
    metadata,
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "follower_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "follower_id", name="followers_pkey"),
)

Index("idx_followers_follower_id", followers_table.c.follower_id)
