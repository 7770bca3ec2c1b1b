"""init

Revision ID: 0001_init
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision = "0001_init"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("email", sa.String(length=254), nullable=False),
    )
    op.create_index("ux_users_email", "users", ["email"], unique=True)

    op.create_table(
        "chirps",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=True),
    )
    op.create_index("ix_chirps_created_at", "chirps", ["created_at"])
    op.create_index("ix_chirps_user_id", "chirps", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_chirps_user_id", table_name="chirps")
    op.drop_index("ix_chirps_created_at", table_name="chirps")
    op.drop_table("chirps")
    op.drop_index("ux_users_email", table_name="users")
    op.drop_table("users")
