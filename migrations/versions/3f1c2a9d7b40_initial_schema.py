"""initial_schema

Create the schema for the social API:
- Roles (seeded: user, moderator, admin)
- Users (case-insensitive unique email, bcrypt hash)
- User invitations (sha256 of the activation token)
- Posts (tag array, optimistic-concurrency version)
- Comments
- Followers (user_id is followed by follower_id)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 09:12:44.512301

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute("CREATE EXTENSION IF NOT EXISTS citext")

    # ========================================================================
    # ROLES table
    # ========================================================================
    roles = op.create_table(
        "roles",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="roles_name_key"),
    )

    op.bulk_insert(
        roles,
        [
            {
                "name": "user",
                "level": 1,
                "description": "A user can create posts and comments",
            },
            {
                "name": "moderator",
                "level": 2,
                "description": "A moderator can update other users posts",
            },
            {
                "name": "admin",
                "level": 3,
                "description": "An admin can update and delete other users posts",
            },
        ],
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("email", postgresql.CITEXT(), nullable=False),
        sa.Column("password", sa.LargeBinary(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("role_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["role_id"], ["roles.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.UniqueConstraint("username", name="users_username_key"),
    )

    # ========================================================================
    # USER_INVITATIONS table
    # ========================================================================
    op.create_table(
        "user_invitations",
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("expiry", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index(
        "idx_user_invitations_user_id", "user_invitations", ["user_id"]
    )

    # ========================================================================
    # POSTS table
    # ========================================================================
    op.create_table(
        "posts",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(100)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("version >= 1", name="version_positive"),
    )
    op.create_index("idx_posts_user_id", "posts", ["user_id"])
    op.create_index(
        "idx_posts_created_at", "posts", [sa.text("created_at DESC")]
    )
    op.create_index("idx_posts_tags", "posts", ["tags"], postgresql_using="gin")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.BigInteger(), autoincrement=True, nullable=False),
        sa.Column("post_id", sa.BigInteger(), nullable=False),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["post_id"], ["posts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_post_id", "comments", ["post_id"])

    # ========================================================================
    # FOLLOWERS table
    # ========================================================================
    op.create_table(
        "followers",
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("follower_id", sa.BigInteger(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["follower_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "follower_id", name="followers_pkey"),
    )
    op.create_index("idx_followers_follower_id", "followers", ["follower_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("followers")
    op.drop_table("comments")
    op.drop_table("posts")
    op.drop_table("user_invitations")
    op.drop_table("users")
    op.drop_table("roles")
    op.execute("DROP EXTENSION IF EXISTS citext")
