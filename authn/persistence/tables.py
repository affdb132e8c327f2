"""SQLAlchemy table definitions.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PLATFORMS TABLE (Tenants)
# ============================================================================
platforms_table = Table(
    "platforms",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("owner_id", UUID, nullable=True),
    Column("custom_domain", String(255), nullable=True, unique=True),
    # {"google": {"client_id": ..., "client_secret": ...}}
    Column(
        "federated_auth_providers", JSONB, nullable=False, server_default="{}"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_platforms_owner_id", platforms_table.c.owner_id)

# ============================================================================
# USERS TABLE (One account per email per platform)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),  # Stored lowercased
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column(
        "platform_id",
        String(64),
        ForeignKey("platforms.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("provider", String(50), nullable=False),  # 'email', 'google', 'saml'
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column("track_events", Boolean, nullable=False, server_default="false"),
    Column("news_letter", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_login_at", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("email", "platform_id", name="uq_users_email_platform"),
)

Index("idx_users_email", users_table.c.email)
Index("idx_users_platform_id", users_table.c.platform_id)
