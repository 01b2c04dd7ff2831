"""initial_schema

Create the accounts schema:
- Users (email or social network authentication, role, status)
- User social networks (one identity per network per user)
- Work members groups and members

Revision ID: 3c1f0e6a9b27
Revises:
Create Date: 2026-10-19 10:12:41.518204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e6a9b27"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("register_date", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("confirm_token", sa.String(255), nullable=True),
        sa.Column("name_first", sa.String(255), nullable=False),
        sa.Column("name_last", sa.String(255), nullable=False),
        sa.Column("new_email", sa.String(255), nullable=True),
        sa.Column("new_email_token", sa.String(255), nullable=True),
        sa.Column("status", sa.String(16), nullable=False),
        sa.Column("reset_password_token", sa.String(255), nullable=True),
        sa.Column(
            "reset_password_expires", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        sa.Column("role", sa.String(16), nullable=False),
        sa.UniqueConstraint("email", name="uq_user_users_email"),
        sa.UniqueConstraint(
            "reset_password_token", name="uq_user_users_reset_password_token"
        ),
    )
    op.create_index("idx_user_users_confirm_token", "user_users", ["confirm_token"])

    op.create_table(
        "user_user_networks",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("user_users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("network", sa.String(32), nullable=False),
        sa.Column("identity", sa.String(255), nullable=False),
        sa.UniqueConstraint(
            "user_id", "network", name="uq_user_user_networks_user_network"
        ),
    )
    op.create_index(
        "idx_user_user_networks_identity",
        "user_user_networks",
        ["network", "identity"],
    )

    op.create_table(
        "work_members_groups",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "work_members_members",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "group_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("work_members_groups.id"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
    )
    op.create_index(
        "idx_work_members_members_group_id", "work_members_members", ["group_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_index(
        "idx_work_members_members_group_id", table_name="work_members_members"
    )
    op.drop_table("work_members_members")
    op.drop_table("work_members_groups")
    op.drop_index("idx_user_user_networks_identity", table_name="user_user_networks")
    op.drop_table("user_user_networks")
    op.drop_index("idx_user_users_confirm_token", table_name="user_users")
    op.drop_table("user_users")
