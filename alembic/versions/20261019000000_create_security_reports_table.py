"""Create security_reports table for webhook intake.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "security_reports",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("source", sa.String(length=32), nullable=False),
        sa.Column("severity", sa.String(length=32), nullable=False),
        sa.Column("title", sa.String(length=512), nullable=False),
        sa.Column("summary", sa.Text(), nullable=False),
        sa.Column("raw_data", sa.Text(), nullable=False, server_default="{}"),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="new"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_security_reports")),
    )
    op.create_index(
        op.f("ix_security_reports_source"),
        "security_reports",
        ["source"],
        unique=False,
    )
    op.create_index(
        op.f("ix_security_reports_severity"),
        "security_reports",
        ["severity"],
        unique=False,
    )
    op.create_index(
        op.f("ix_security_reports_status"),
        "security_reports",
        ["status"],
        unique=False,
    )
    op.create_index(
        op.f("ix_security_reports_created_at"),
        "security_reports",
        ["created_at"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_security_reports_created_at"), table_name="security_reports")
    op.drop_index(op.f("ix_security_reports_status"), table_name="security_reports")
    op.drop_index(op.f("ix_security_reports_severity"), table_name="security_reports")
    op.drop_index(op.f("ix_security_reports_source"), table_name="security_reports")
    op.drop_table("security_reports")
