"""initial_schema

Create the schema for federated authentication:
- Platforms (tenants, optional custom domain and per-provider OAuth clients)
- Users (one account per email per platform)

Revision ID: 3c1f9a2b7d40
Revises:
Create Date: 2026-10-18 09:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # PLATFORMS table
    # ========================================================================
    op.create_table(
        "platforms",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=True),
        sa.Column("custom_domain", sa.String(255), nullable=True),
        sa.Column(
            "federated_auth_providers",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
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
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("custom_domain"),
    )
    op.create_index("idx_platforms_owner_id", "platforms", ["owner_id"])

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("platform_id", sa.String(64), nullable=True),
        sa.Column("provider", sa.String(50), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "track_events", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("news_letter", sa.Boolean(), nullable=False, server_default="false"),
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
        sa.Column("last_login_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["platform_id"], ["platforms.id"], ondelete="CASCADE"
        ),
        sa.UniqueConstraint("email", "platform_id", name="uq_users_email_platform"),
    )
    op.create_index("idx_users_email", "users", ["email"])
    op.create_index("idx_users_platform_id", "users", ["platform_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_platform_id", table_name="users")
    op.drop_index("idx_users_email", table_name="users")
    op.drop_table("users")

    op.drop_index("idx_platforms_owner_id", table_name="platforms")
    op.drop_table("platforms")
