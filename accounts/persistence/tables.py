"""SQLAlchemy table definitions for accounts.

These tables match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "user_users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("register_date", TIMESTAMP(timezone=True), nullable=False),
    Column("email", String(255), nullable=True),
    Column("password_hash", String(255), nullable=True),
    Column("confirm_token", String(255), nullable=True),
    Column("name_first", String(255), nullable=False),
    Column("name_last", String(255), nullable=False),
    Column("new_email", String(255), nullable=True),
    Column("new_email_token", String(255), nullable=True),
    Column("status", String(16), nullable=False),
    Column("reset_password_token", String(255), nullable=True),
    Column("reset_password_expires", TIMESTAMP(timezone=True), nullable=True),
    Column("role", String(16), nullable=False),
    UniqueConstraint("email", name="uq_user_users_email"),
    UniqueConstraint("reset_password_token", name="uq_user_users_reset_password_token"),
)

Index("idx_user_users_confirm_token", users_table.c.confirm_token)

# ============================================================================
# USER SOCIAL NETWORKS TABLE
# ============================================================================
user_networks_table = Table(
    "user_user_networks",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("user_users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("network", String(32), nullable=False),
    Column("identity", String(255), nullable=False),
    UniqueConstraint("user_id", "network", name="uq_user_user_networks_user_network"),
)

Index(
    "idx_user_user_networks_identity",
    user_networks_table.c.network,
    user_networks_table.c.identity,
)

# ============================================================================
# WORK MEMBERS TABLES
# ============================================================================
groups_table = Table(
    "work_members_groups",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(255), nullable=False),
)

members_table = Table(
    "work_members_members",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "group_id",
        UUID(as_uuid=True),
        ForeignKey("work_members_groups.id"),
        nullable=False,
    ),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
)

Index("idx_work_members_members_group_id", members_table.c.group_id)
