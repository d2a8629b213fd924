"""Create users and thoughts tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates `users` and `thoughts`, with thoughts.created_by pointing at
       users.id (SET NULL on delete so thoughts outlive their owner).

Rollback: downgrade() drops both tables (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("password", sa.String(128), nullable=False, comment="bcrypt hash"),
        sa.Column("access_token", sa.String(512), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_access_token", "users", ["access_token"], unique=True)

    op.create_table(
        "thoughts",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("message", sa.String(140), nullable=False),
        sa.Column("hearts", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "char_length(message) BETWEEN 5 AND 140",
            name="ck_thoughts_message_length",
        ),
    )

    # Listing is always newest first
    op.create_index(
        "idx_thoughts_created_at",
        "thoughts",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    op.drop_index("idx_thoughts_created_at", table_name="thoughts")
    op.drop_table("thoughts")
    op.drop_index("ix_users_access_token", table_name="users")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
